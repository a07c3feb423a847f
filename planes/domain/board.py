from typing import List, Optional

from .config import EMPTY, ORIENTATION_COUNT
from .plane import Plane
from .types import Cell, GuessPoint


def candidate_count(rows: int, cols: int) -> int:
    return rows * cols * ORIENTATION_COUNT


def candidate_index(row: int, col: int, orientation: int, rows: int) -> int:
    return (col * rows + row) * ORIENTATION_COUNT + orientation


def candidate_plane(idx: int, rows: int) -> Plane:
    cell, orientation = divmod(idx, ORIENTATION_COUNT)
    col, row = divmod(cell, rows)
    return Plane(row, col, orientation)


def candidate_head(idx: int, rows: int) -> Cell:
    col, row = divmod(idx // ORIENTATION_COUNT, rows)
    return row, col


def plane_index(plane: Plane, rows: int) -> int:
    return candidate_index(plane.row, plane.col, plane.orientation, rows)


def cell_index(r: int, c: int, cols: int) -> int:
    return r * cols + c


def in_bounds(r: int, c: int, rows: int, cols: int) -> bool:
    return 0 <= r < rows and 0 <= c < cols


def create_board(rows: int, cols: int) -> List[List[str]]:
    return [[EMPTY for _ in range(cols)] for _ in range(rows)]


def guesses_board(rows: int, cols: int, guesses: Optional[List[GuessPoint]] = None) -> List[List[str]]:
    board = create_board(rows, cols)
    for gp in guesses or []:
        if in_bounds(gp.row, gp.col, rows, cols):
            board[gp.row][gp.col] = gp.outcome
    return board
