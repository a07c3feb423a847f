from typing import List, Optional, Tuple

from planes.domain.types import GuessPoint


class ProbeHistory:
    """Recorded probes plus a cursor at the last applied one (-1 before the first)."""

    def __init__(self) -> None:
        self._plays: List[GuessPoint] = []
        self.cursor = -1

    def clear(self) -> None:
        self._plays = []
        self.cursor = -1

    def __len__(self) -> int:
        return len(self._plays)

    @property
    def plays(self) -> Tuple[GuessPoint, ...]:
        return tuple(self._plays)

    def applied(self) -> List[GuessPoint]:
        return self._plays[: self.cursor + 1]

    def record(self, gp: GuessPoint) -> None:
        # A new probe after a revert drops the redo tail.
        del self._plays[self.cursor + 1:]
        self._plays.append(gp)
        self.cursor = len(self._plays) - 1

    def revert_target(self, n: int) -> int:
        return max(-1, self.cursor - n)

    def peek_next(self) -> Optional[GuessPoint]:
        if self.cursor >= len(self._plays) - 1:
            return None
        return self._plays[self.cursor + 1]

    def can_revert(self) -> bool:
        return self.cursor >= 0

    def can_advance(self) -> bool:
        return self.cursor < len(self._plays) - 1
