from dataclasses import dataclass
from typing import Dict, List, Tuple

from planes.domain.board import cell_index

from .definition import GameLayout
from .placements import build_cover_index, valid_candidates


@dataclass
class LayoutRuntime:
    definition: GameLayout
    valid: List[bool]
    cover_index: List[Tuple[int, ...]]

    def body_covers(self, r: int, c: int) -> Tuple[int, ...]:
        return self.cover_index[cell_index(r, c, self.definition.cols)]


class PlacementCache:
    def __init__(self):
        self._cache: Dict[str, LayoutRuntime] = {}

    def _key(self, layout: GameLayout) -> str:
        return f"{layout.geometry_key}:{layout.layout_version}"

    def get(self, layout: GameLayout) -> LayoutRuntime:
        key = self._key(layout)
        if key not in self._cache:
            valid = valid_candidates(layout.rows, layout.cols, layout.shape)
            cover_index = build_cover_index(layout.rows, layout.cols, layout.shape)
            self._cache[key] = LayoutRuntime(layout, valid, cover_index)
        return self._cache[key]

    def clear(self) -> None:
        self._cache.clear()


DEFAULT_PLACEMENT_CACHE = PlacementCache()
