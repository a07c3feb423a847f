from typing import Tuple

from planes.domain.config import DEFAULT_COLS, DEFAULT_PLANE_COUNT, DEFAULT_ROWS

from .definition import GameLayout, PlaneShape


def classic_shape() -> PlaneShape:
    # Head, fuselage cell, wings, rear fuselage, tail.
    return PlaneShape(
        shape_id="classic",
        name="Classic plane",
        cells=(
            (0, 0),
            (1, 0),
            (1, -1),
            (1, 1),
            (1, -2),
            (1, 2),
            (2, 0),
            (3, 0),
            (3, -1),
            (3, 1),
        ),
    )


def tee_shape() -> PlaneShape:
    return PlaneShape(
        shape_id="tee",
        name="Small tee",
        cells=((0, 0), (1, 0), (2, 0), (1, 1)),
    )


def classic_layout() -> GameLayout:
    return GameLayout(
        layout_id="classic",
        name=f"Classic Planes ({DEFAULT_ROWS}x{DEFAULT_COLS})",
        rows=DEFAULT_ROWS,
        cols=DEFAULT_COLS,
        plane_count=DEFAULT_PLANE_COUNT,
        shape=classic_shape(),
        layout_version=1,
    )


def mini_layout() -> GameLayout:
    return GameLayout(
        layout_id="mini",
        name="Mini (6x6, one tee)",
        rows=6,
        cols=6,
        plane_count=1,
        shape=tee_shape(),
        layout_version=1,
    )


def builtin_layouts() -> Tuple[GameLayout, ...]:
    return (classic_layout(), mini_layout())
