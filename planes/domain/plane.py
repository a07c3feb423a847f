from dataclasses import dataclass
from typing import Tuple

from .config import EAST_WEST, NORTH_SOUTH, ORIENTATION_NAMES, ORIENTATIONS, SOUTH_NORTH, WEST_EAST
from .types import Cell

# Clockwise quarter turn: head pointing north ends up pointing east, and so on.
_CLOCKWISE = {
    NORTH_SOUTH: EAST_WEST,
    EAST_WEST: SOUTH_NORTH,
    SOUTH_NORTH: WEST_EAST,
    WEST_EAST: NORTH_SOUTH,
}


@dataclass(frozen=True)
class Plane:
    """A plane placement: head cell plus orientation. The footprint comes from a PlaneShape."""

    row: int
    col: int
    orientation: int = NORTH_SOUTH

    def __post_init__(self):
        if self.orientation not in ORIENTATIONS:
            raise ValueError(f"invalid orientation: {self.orientation}")

    @property
    def head(self) -> Cell:
        return self.row, self.col

    def is_head(self, cell: Cell) -> bool:
        return cell == self.head

    def __add__(self, offset: Cell) -> "Plane":
        dr, dc = offset
        return Plane(self.row + dr, self.col + dc, self.orientation)

    def rotated(self) -> "Plane":
        return Plane(self.row, self.col, _CLOCKWISE[self.orientation])

    def __str__(self) -> str:
        return f"Plane(head=({self.row}, {self.col}), {ORIENTATION_NAMES[self.orientation]})"


def rotate_offset(offset: Cell, orientation: int) -> Cell:
    dr, dc = offset
    if orientation == NORTH_SOUTH:
        return dr, dc
    if orientation == SOUTH_NORTH:
        return -dr, -dc
    if orientation == WEST_EAST:
        return -dc, dr
    return dc, -dr


def oriented_offsets(shape_cells: Tuple[Cell, ...], orientation: int) -> Tuple[Cell, ...]:
    return tuple(rotate_offset(cell, orientation) for cell in shape_cells)
