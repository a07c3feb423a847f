import random
from collections import OrderedDict
from typing import Dict, List, Optional, Tuple

from planes.domain.board import guesses_board, in_bounds
from planes.domain.config import DEFAULT_COLS, DEFAULT_PLANE_COUNT, DEFAULT_ROWS
from planes.domain.plane import Plane
from planes.domain.types import Cell, GuessPoint
from planes.layouts.builtins import classic_shape
from planes.layouts.cache import DEFAULT_PLACEMENT_CACHE
from planes.layouts.definition import GameLayout, PlaneShape
from planes.layouts.validation import validate_layout
from planes.strategies.selection import choose_next_probe
from planes.utils.debug import debug_event

from .choice_map import ChoiceMap
from .head_data import HeadData
from .history import ProbeHistory


def _render(rows: int, cols: int, guesses: List[GuessPoint]) -> str:
    return "\n".join("".join(row) for row in guesses_board(rows, cols, guesses))


class ComputerLogic:
    """
    Computer player: keeps the belief state over plane placements and picks probes.

    State is a pure function of the probes applied since the last reset, so
    revert and advance rebuild it by replaying the recorded probes.
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        cols: int = DEFAULT_COLS,
        plane_count: int = DEFAULT_PLANE_COUNT,
        shape: Optional[PlaneShape] = None,
        rng: Optional[random.Random] = None,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.shape = shape if shape is not None else classic_shape()
        self.last_strategy: Optional[str] = None
        self.initialize(rows, cols, plane_count)

    @classmethod
    def from_layout(cls, layout: GameLayout, rng: Optional[random.Random] = None) -> "ComputerLogic":
        return cls(layout.rows, layout.cols, layout.plane_count, shape=layout.shape, rng=rng)

    # -----------------------------
    # Lifecycle
    # -----------------------------
    def initialize(self, rows: int, cols: int, plane_count: int) -> None:
        layout = GameLayout(
            layout_id="engine",
            name=f"Engine {rows}x{cols}",
            rows=rows,
            cols=cols,
            plane_count=plane_count,
            shape=self.shape,
        )
        errors = validate_layout(layout)
        if errors:
            raise ValueError("; ".join(errors))

        self.layout = layout
        self.rows = rows
        self.cols = cols
        self.plane_count = plane_count
        self._choice_map = ChoiceMap(layout, DEFAULT_PLACEMENT_CACHE.get(layout))
        self._history = ProbeHistory()
        self.reset()

    def reset(self) -> None:
        """Back to the post-initialize belief state. The recorded plays are kept for advance()."""
        self._choice_map.reset()
        self._guesses: List[GuessPoint] = []
        self._extended_guesses: List[GuessPoint] = []
        self._heads: Dict[Cell, HeadData] = OrderedDict()
        self._confirmed: List[Plane] = []
        self._history.cursor = -1

    # -----------------------------
    # Read-only views
    # -----------------------------
    @property
    def choice_map(self) -> ChoiceMap:
        return self._choice_map

    @property
    def confirmed_planes(self) -> Tuple[Plane, ...]:
        return tuple(self._confirmed)

    @property
    def active_heads(self) -> Tuple[HeadData, ...]:
        return tuple(self._heads.values())

    @property
    def guesses(self) -> Tuple[GuessPoint, ...]:
        return tuple(self._guesses)

    @property
    def extended_guesses(self) -> Tuple[GuessPoint, ...]:
        return tuple(self._extended_guesses)

    @property
    def history(self) -> ProbeHistory:
        return self._history

    def is_solved(self) -> bool:
        return len(self._confirmed) >= self.plane_count

    # -----------------------------
    # Probes
    # -----------------------------
    def submit_probe(self, row: int, col: int, outcome: str) -> List[Plane]:
        """Apply a probe result; returns the planes it confirmed."""
        if not in_bounds(row, col, self.rows, self.cols):
            raise ValueError(f"probe ({row}, {col}) outside {self.rows}x{self.cols} grid")
        gp = GuessPoint(row, col, outcome)
        self._history.record(gp)
        return self._add_data(gp)

    def _add_data(self, gp: GuessPoint) -> List[Plane]:
        self._guesses.append(gp)
        self._extended_guesses.append(gp)

        self._choice_map.apply(gp)
        self._update_head_data(gp)

        found: List[Plane] = []
        for head in [h for h, hd in self._heads.items() if hd.is_resolved]:
            plane = self._heads.pop(head).resolved_plane()
            self._confirm_plane(plane)
            found.append(plane)
        return found

    def _update_head_data(self, gp: GuessPoint) -> None:
        for hd in self._heads.values():
            was_inconsistent = hd.is_inconsistent
            hd.update(gp)
            if hd.is_inconsistent and not was_inconsistent:
                debug_event(
                    "Head data",
                    f"every orientation of head {hd.head} was discarded",
                    _render(self.rows, self.cols, self._guesses),
                    level="warning",
                )

        if not gp.is_dead():
            return
        if gp.cell in self._heads or any(p.head == gp.cell for p in self._confirmed):
            return

        # A late head still learns from everything seen so far.
        self._heads[gp.cell] = HeadData(
            self.rows,
            self.cols,
            gp.row,
            gp.col,
            self.shape,
            history=self._extended_guesses,
        )

    def _confirm_plane(self, plane: Plane) -> None:
        for synthetic in self._choice_map.apply_plane(plane):
            if synthetic not in self._extended_guesses:
                self._extended_guesses.append(synthetic)
        self._confirmed.append(plane)
        debug_event(
            "Plane confirmed",
            f"{plane} ({len(self._confirmed)}/{self.plane_count})",
        )

    # -----------------------------
    # Move selection
    # -----------------------------
    def select_move(self) -> Optional[Cell]:
        choice = choose_next_probe(self._choice_map, self.active_heads, self.rng)
        if choice is None:
            self.last_strategy = None
            if not self.is_solved():
                debug_event(
                    "Move selection",
                    f"no move left with {len(self._confirmed)}/{self.plane_count} planes found",
                    _render(self.rows, self.cols, self._guesses),
                    level="warning",
                )
            return None
        self.last_strategy, cell = choice
        return cell

    def influence(self, row: int, col: int) -> int:
        return self._choice_map.points_influenced(row, col)

    # -----------------------------
    # Undo / redo
    # -----------------------------
    def revert(self, n: int) -> None:
        if n <= 0:
            return
        target = self._history.revert_target(n)
        plays = self._history.plays
        self.reset()
        for i in range(target + 1):
            self._add_data(plays[i])
        self._history.cursor = target

    def advance(self) -> None:
        gp = self._history.peek_next()
        if gp is None:
            return
        self._add_data(gp)
        self._history.cursor += 1

    def can_revert(self) -> bool:
        return self._history.can_revert()

    def can_advance(self) -> bool:
        return self._history.can_advance()
