from typing import List, Optional, Set, Tuple

from planes.domain.board import candidate_count, candidate_head, candidate_index, in_bounds, plane_index
from planes.domain.config import CHOICE_CONSUMED, CHOICE_ELIMINATED, DEAD, HIT, MISS, NOT_USEFUL, ORIENTATIONS
from planes.domain.plane import Plane
from planes.domain.types import Cell, GuessPoint
from planes.layouts.cache import DEFAULT_PLACEMENT_CACHE, LayoutRuntime
from planes.layouts.definition import GameLayout
from planes.layouts.placements import plane_body


class ChoiceMap:
    """
    Scores for every (row, col, orientation) candidate placement.

    -1 marks an impossible placement, -2 a placement whose head was already
    probed, and values >= 0 count the hits consistent with the placement.
    Negative entries never go back to a score.
    """

    def __init__(self, layout: GameLayout, runtime: Optional[LayoutRuntime] = None):
        self.layout = layout
        self.rows = layout.rows
        self.cols = layout.cols
        self._runtime = runtime if runtime is not None else DEFAULT_PLACEMENT_CACHE.get(layout)
        self.scores: List[int] = []
        self._counted_hits: Set[Cell] = set()
        self.reset()

    def reset(self) -> None:
        self.scores = [0 if ok else CHOICE_ELIMINATED for ok in self._runtime.valid]
        self._counted_hits = set()

    def __len__(self) -> int:
        return candidate_count(self.rows, self.cols)

    def __getitem__(self, idx: int) -> int:
        return self.scores[idx]

    def score(self, plane: Plane) -> int:
        return self.scores[plane_index(plane, self.rows)]

    def head_of(self, idx: int) -> Cell:
        return candidate_head(idx, self.rows)

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self.scores)

    def consume_head(self, r: int, c: int) -> None:
        for orientation in ORIENTATIONS:
            self.scores[candidate_index(r, c, orientation, self.rows)] = CHOICE_CONSUMED

    def apply_hit(self, r: int, c: int) -> None:
        if (r, c) in self._counted_hits:
            return
        self._counted_hits.add((r, c))
        for idx in self._runtime.body_covers(r, c):
            if self.scores[idx] >= 0:
                self.scores[idx] += 1

    def apply_miss(self, r: int, c: int) -> None:
        for idx in self._runtime.body_covers(r, c):
            if self.scores[idx] >= 0:
                self.scores[idx] = CHOICE_ELIMINATED

    def apply(self, gp: GuessPoint) -> None:
        if not in_bounds(gp.row, gp.col, self.rows, self.cols):
            raise ValueError(f"probe ({gp.row}, {gp.col}) outside {self.rows}x{self.cols} grid")

        self.consume_head(gp.row, gp.col)

        if gp.outcome == HIT:
            self.apply_hit(gp.row, gp.col)
        elif gp.outcome == MISS:
            self.apply_miss(gp.row, gp.col)
        elif gp.outcome == DEAD:
            # A head cannot be the body cell of another placement. This is the
            # same rule as a miss, which assumes planes never overlap.
            self.apply_miss(gp.row, gp.col)

    def apply_plane(self, plane: Plane) -> List[GuessPoint]:
        """Mark a confirmed plane's territory as explained; returns the synthetic misses applied."""
        synthetic: List[GuessPoint] = []
        for r, c in plane_body(plane, self.layout.shape):
            gp = GuessPoint(r, c, MISS)
            self.apply(gp)
            synthetic.append(gp)
        return synthetic

    def points_influenced(self, r: int, c: int) -> int:
        """Number of viable placements covering a cell, or NOT_USEFUL when its heads are all ruled out."""
        if not any(
            self.scores[candidate_index(r, c, orientation, self.rows)] >= 0
            for orientation in ORIENTATIONS
        ):
            return NOT_USEFUL
        return sum(1 for idx in self._runtime.body_covers(r, c) if self.scores[idx] >= 0)

    def viable_count(self) -> int:
        return sum(1 for score in self.scores if score >= 0)
