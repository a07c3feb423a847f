import random
from typing import Dict, Iterable, List, Optional, Set

from planes.layouts.definition import GameLayout, PlaneShape
from planes.layouts.placements import is_position_valid, plane_cells

from .board import create_board, in_bounds
from .config import DEAD, HIT, MISS, ORIENTATIONS, RANDOM_LAYOUT_MAX_ATTEMPTS
from .plane import Plane
from .types import Cell, GuessPoint


class PlaneGrid:
    """
    A board with hidden planes: the data source the engine probes against.

    Planes always fit the grid and never overlap; operations that would break
    that leave the board unchanged and return False.
    """

    def __init__(self, rows: int, cols: int, plane_count: int, shape: PlaneShape):
        if rows <= 0 or cols <= 0:
            raise ValueError("grid dimensions must be positive")
        if plane_count <= 0:
            raise ValueError("plane_count must be positive")
        self.rows = rows
        self.cols = cols
        self.plane_count = plane_count
        self.shape = shape
        self._planes: List[Plane] = []

    @classmethod
    def from_layout(cls, layout: GameLayout) -> "PlaneGrid":
        return cls(layout.rows, layout.cols, layout.plane_count, layout.shape)

    @property
    def planes(self) -> List[Plane]:
        return list(self._planes)

    def __len__(self) -> int:
        return len(self._planes)

    def is_complete(self) -> bool:
        return len(self._planes) == self.plane_count

    def get_plane(self, i: int) -> Optional[Plane]:
        if 0 <= i < len(self._planes):
            return self._planes[i]
        return None

    def clear(self) -> None:
        self._planes = []

    def _occupied(self, skip: Optional[int] = None) -> Set[Cell]:
        cells: Set[Cell] = set()
        for i, plane in enumerate(self._planes):
            if i == skip:
                continue
            cells.update(plane_cells(plane, self.shape))
        return cells

    def can_place(self, plane: Plane, skip: Optional[int] = None) -> bool:
        if not is_position_valid(plane, self.rows, self.cols, self.shape):
            return False
        occupied = self._occupied(skip)
        return not any(cell in occupied for cell in plane_cells(plane, self.shape))

    def add_plane(self, plane: Plane) -> bool:
        if len(self._planes) >= self.plane_count:
            return False
        if not self.can_place(plane):
            return False
        self._planes.append(plane)
        return True

    def remove_plane(self, i: int) -> Optional[Plane]:
        if 0 <= i < len(self._planes):
            return self._planes.pop(i)
        return None

    def _replace_plane(self, i: int, plane: Plane) -> bool:
        if not (0 <= i < len(self._planes)):
            return False
        if not self.can_place(plane, skip=i):
            return False
        self._planes[i] = plane
        return True

    def rotate_plane(self, i: int) -> bool:
        current = self.get_plane(i)
        if current is None:
            return False
        return self._replace_plane(i, current.rotated())

    def move_plane(self, i: int, dr: int, dc: int) -> bool:
        current = self.get_plane(i)
        if current is None:
            return False
        return self._replace_plane(i, current + (dr, dc))

    def move_plane_up(self, i: int) -> bool:
        return self.move_plane(i, -1, 0)

    def move_plane_down(self, i: int) -> bool:
        return self.move_plane(i, 1, 0)

    def move_plane_left(self, i: int) -> bool:
        return self.move_plane(i, 0, -1)

    def move_plane_right(self, i: int) -> bool:
        return self.move_plane(i, 0, 1)

    def init_random(self, rng: Optional[random.Random] = None) -> bool:
        """Place `plane_count` planes at random. Returns False if no layout was found."""
        if rng is None:
            rng = random.Random()

        for _ in range(RANDOM_LAYOUT_MAX_ATTEMPTS):
            self.clear()
            placed_all = True
            for _ in range(self.plane_count):
                placed = False
                for _ in range(50):
                    plane = Plane(
                        rng.randrange(self.rows),
                        rng.randrange(self.cols),
                        rng.choice(ORIENTATIONS),
                    )
                    if self.add_plane(plane):
                        placed = True
                        break
                if not placed:
                    placed_all = False
                    break
            if placed_all:
                return True

        self.clear()
        return False

    def _cell_owners(self) -> Dict[Cell, Plane]:
        owners: Dict[Cell, Plane] = {}
        for plane in self._planes:
            for cell in plane_cells(plane, self.shape):
                owners[cell] = plane
        return owners

    def evaluate(self, row: int, col: int) -> str:
        if not in_bounds(row, col, self.rows, self.cols):
            raise ValueError(f"probe ({row}, {col}) outside {self.rows}x{self.cols} grid")
        for plane in self._planes:
            if plane.is_head((row, col)):
                return DEAD
        if (row, col) in self._cell_owners():
            return HIT
        return MISS

    def guess(self, row: int, col: int) -> GuessPoint:
        return GuessPoint(row, col, self.evaluate(row, col))

    def is_plane_dead(self, plane: Plane, guesses: Iterable[GuessPoint]) -> bool:
        return any(gp.is_dead() and plane.is_head(gp.cell) for gp in guesses)

    def all_dead(self, guesses: Iterable[GuessPoint]) -> bool:
        guess_list = list(guesses)
        return bool(self._planes) and all(self.is_plane_dead(p, guess_list) for p in self._planes)

    def render(self, guesses: Optional[Iterable[GuessPoint]] = None) -> str:
        """Text dump: planes as '#', heads as '@', probes on top with their outcome marks."""
        board = create_board(self.rows, self.cols)
        for plane in self._planes:
            for r, c in plane_cells(plane, self.shape):
                board[r][c] = "#"
            board[plane.row][plane.col] = "@"
        for gp in guesses or []:
            if in_bounds(gp.row, gp.col, self.rows, self.cols):
                board[gp.row][gp.col] = gp.outcome
        return "\n".join("".join(row) for row in board)
