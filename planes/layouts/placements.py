from typing import Iterator, List, Tuple

from planes.domain.board import candidate_count, candidate_plane, in_bounds, plane_index
from planes.domain.config import ORIENTATIONS
from planes.domain.plane import Plane, oriented_offsets
from planes.domain.types import Cell

from .definition import PlaneShape


def plane_cells(plane: Plane, shape: PlaneShape) -> Tuple[Cell, ...]:
    """Footprint of a placed plane, head first."""
    return tuple(
        (plane.row + dr, plane.col + dc)
        for dr, dc in oriented_offsets(shape.cells, plane.orientation)
    )


def plane_body(plane: Plane, shape: PlaneShape) -> Tuple[Cell, ...]:
    return plane_cells(plane, shape)[1:]


def contains_point(plane: Plane, cell: Cell, shape: PlaneShape) -> bool:
    return cell in plane_cells(plane, shape)


def is_position_valid(plane: Plane, rows: int, cols: int, shape: PlaneShape) -> bool:
    return all(in_bounds(r, c, rows, cols) for r, c in plane_cells(plane, shape))


def planes_intersecting_point(cell: Cell, shape: PlaneShape) -> Iterator[Plane]:
    """Every plane placement (on an unbounded grid) whose footprint contains `cell`."""
    r, c = cell
    for orientation in ORIENTATIONS:
        for dr, dc in oriented_offsets(shape.cells, orientation):
            yield Plane(r - dr, c - dc, orientation)


def valid_candidates(rows: int, cols: int, shape: PlaneShape) -> List[bool]:
    return [
        is_position_valid(candidate_plane(idx, rows), rows, cols, shape)
        for idx in range(candidate_count(rows, cols))
    ]


def build_cover_index(rows: int, cols: int, shape: PlaneShape) -> List[Tuple[int, ...]]:
    """
    For each cell (row-major), the candidate indices of grid-valid placements
    covering it with their body. Placements headed at the cell are left out.
    """
    index: List[Tuple[int, ...]] = []
    for r in range(rows):
        for c in range(cols):
            covers: List[int] = []
            for plane in planes_intersecting_point((r, c), shape):
                if plane.is_head((r, c)):
                    continue
                if not is_position_valid(plane, rows, cols, shape):
                    continue
                covers.append(plane_index(plane, rows))
            index.append(tuple(covers))
    return index
