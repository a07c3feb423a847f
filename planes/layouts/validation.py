from typing import List

from .definition import GameLayout, PlaneShape


def validate_layout(layout: GameLayout) -> List[str]:
    errors: List[str] = []

    if layout.rows <= 0 or layout.cols <= 0:
        errors.append("grid dimensions must be positive")

    if layout.plane_count <= 0:
        errors.append("layout must hide at least one plane")

    _validate_shape(layout.shape, errors)

    if not errors and layout.shape.cells:
        span_r = max(r for r, _ in layout.shape.cells) - min(r for r, _ in layout.shape.cells) + 1
        span_c = max(c for _, c in layout.shape.cells) - min(c for _, c in layout.shape.cells) + 1
        fits_upright = span_r <= layout.rows and span_c <= layout.cols
        fits_sideways = span_c <= layout.rows and span_r <= layout.cols
        if not (fits_upright or fits_sideways):
            errors.append(f"shape {layout.shape.shape_id} does not fit a {layout.rows}x{layout.cols} grid")

    return errors


def _validate_shape(shape: PlaneShape, errors: List[str]) -> None:
    if not shape.shape_id:
        errors.append("shape_id must be non-empty")

    if not shape.cells:
        errors.append(f"shape {shape.shape_id} must define cells")
        return

    if shape.cells[0] != (0, 0):
        errors.append(f"shape {shape.shape_id} must start with its head at (0, 0)")

    if len(set(shape.cells)) != len(shape.cells):
        errors.append(f"shape {shape.shape_id} has duplicate cells")

    if len(shape.cells) < 2:
        errors.append(f"shape {shape.shape_id} needs at least one body cell")
