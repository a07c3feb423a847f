import hashlib
import json
from dataclasses import dataclass
from typing import Iterable, Tuple

from planes.domain.types import Cell


def normalize_shape_cells(cells: Iterable[Cell]) -> Tuple[Cell, ...]:
    """Translate a footprint so its first cell (the head) sits at (0, 0), keeping the order."""
    cell_list = list(cells)
    if not cell_list:
        return tuple()
    head_r, head_c = cell_list[0]
    seen = set()
    norm = []
    for r, c in cell_list:
        cell = (r - head_r, c - head_c)
        if cell in seen:
            continue
        seen.add(cell)
        norm.append(cell)
    return tuple(norm)


@dataclass(frozen=True)
class PlaneShape:
    shape_id: str
    name: str
    cells: Tuple[Cell, ...]  # orientation 0, head first

    def normalized(self) -> dict:
        return {
            "shape_id": self.shape_id,
            "name": self.name,
            "cells": [list(cell) for cell in normalize_shape_cells(self.cells)],
        }

    @property
    def body(self) -> Tuple[Cell, ...]:
        return tuple(self.cells[1:])

    def __len__(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class GameLayout:
    layout_id: str
    name: str
    rows: int
    cols: int
    plane_count: int
    shape: PlaneShape
    layout_version: int = 1

    @property
    def geometry_key(self) -> str:
        """Key of everything the candidate space depends on (not the plane count)."""
        payload = json.dumps(
            {"rows": int(self.rows), "cols": int(self.cols), "cells": self.shape.normalized()["cells"]},
            sort_keys=True,
            separators=(",", ":"),
        )
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]
