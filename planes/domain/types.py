from dataclasses import dataclass
from typing import Tuple

from .config import DEAD, OUTCOMES

Cell = Tuple[int, int]


@dataclass(frozen=True)
class GuessPoint:
    row: int
    col: int
    outcome: str

    def __post_init__(self):
        if self.outcome not in OUTCOMES:
            raise ValueError(f"unknown probe outcome: {self.outcome!r}")

    @property
    def cell(self) -> Cell:
        return self.row, self.col

    def is_dead(self) -> bool:
        return self.outcome == DEAD
