from typing import Iterable, List, Optional

from planes.domain.config import DEAD, HIT, MISS, ORIENTATIONS
from planes.domain.plane import Plane
from planes.domain.types import Cell, GuessPoint
from planes.layouts.definition import PlaneShape
from planes.layouts.placements import is_position_valid, plane_body


class PlaneOrientationData:
    """One orientation hypothesis for a confirmed head."""

    def __init__(self, plane: Plane, shape: PlaneShape, discarded: bool = False):
        self.plane = plane
        self.discarded = discarded
        # Body cells, head excluded, not yet proven to be hit.
        self.points_not_tested: List[Cell] = list(plane_body(plane, shape))

    def update(self, gp: GuessPoint) -> None:
        if self.discarded:
            return

        try:
            idx = self.points_not_tested.index(gp.cell)
        except ValueError:
            return

        if gp.outcome == DEAD and idx == 0:
            del self.points_not_tested[idx]
            return

        if gp.outcome in (MISS, DEAD):
            self.discarded = True
        elif gp.outcome == HIT:
            del self.points_not_tested[idx]

    @property
    def all_points_checked(self) -> bool:
        return len(self.points_not_tested) == 0

    def __repr__(self) -> str:
        state = "discarded" if self.discarded else f"untested={len(self.points_not_tested)}"
        return f"PlaneOrientationData({self.plane}, {state})"


class HeadData:
    """
    Orientation inference for a cell known to be a plane head.

    The four orientations start alive unless they leave the grid. Every
    probe can discard orientations or tick off their body cells; the record
    resolves once one orientation has all its body cells hit, or once it is
    the only one left.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        head_row: int,
        head_col: int,
        shape: PlaneShape,
        history: Iterable[GuessPoint] = (),
    ):
        self.rows = rows
        self.cols = cols
        self.head_row = head_row
        self.head_col = head_col
        self.resolved_orientation: Optional[int] = None

        self.options: List[PlaneOrientationData] = []
        for orientation in ORIENTATIONS:
            plane = Plane(head_row, head_col, orientation)
            discarded = not is_position_valid(plane, rows, cols, shape)
            self.options.append(PlaneOrientationData(plane, shape, discarded))

        for gp in history:
            self.update(gp)
        if self.resolved_orientation is None:
            self._check_resolution()

    @property
    def head(self) -> Cell:
        return self.head_row, self.head_col

    @property
    def is_resolved(self) -> bool:
        return self.resolved_orientation is not None

    @property
    def is_inconsistent(self) -> bool:
        return not self.is_resolved and all(pod.discarded for pod in self.options)

    def alive_options(self) -> List[PlaneOrientationData]:
        return [pod for pod in self.options if not pod.discarded]

    def update(self, gp: GuessPoint) -> bool:
        if self.resolved_orientation is not None:
            return True

        for pod in self.options:
            pod.update(gp)

        return self._check_resolution()

    def _check_resolution(self) -> bool:
        for orientation, pod in enumerate(self.options):
            if not pod.discarded and pod.all_points_checked:
                self.resolved_orientation = orientation
                return True

        alive = self.alive_options()
        if len(alive) == 1:
            self.resolved_orientation = alive[0].plane.orientation
            return True
        return False

    def resolved_plane(self) -> Optional[Plane]:
        if self.resolved_orientation is None:
            return None
        return Plane(self.head_row, self.head_col, self.resolved_orientation)
