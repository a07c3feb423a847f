from .builtins import builtin_layouts, classic_layout, classic_shape, mini_layout, tee_shape
from .cache import DEFAULT_PLACEMENT_CACHE, LayoutRuntime, PlacementCache
from .definition import GameLayout, PlaneShape
from .placements import (
    build_cover_index,
    contains_point,
    is_position_valid,
    plane_body,
    plane_cells,
    planes_intersecting_point,
)
from .validation import validate_layout

__all__ = [
    "GameLayout",
    "PlaneShape",
    "LayoutRuntime",
    "PlacementCache",
    "DEFAULT_PLACEMENT_CACHE",
    "classic_layout",
    "classic_shape",
    "mini_layout",
    "tee_shape",
    "builtin_layouts",
    "build_cover_index",
    "contains_point",
    "is_position_valid",
    "plane_body",
    "plane_cells",
    "planes_intersecting_point",
    "validate_layout",
]
