"""
Shape construction helpers.

All functions are pure and total: invalid sizes degrade to a simpler shape
instead of raising.
"""

import logging

from .models import ShapeKind, ShapeSpec

logger = logging.getLogger(__name__)


def rounded_rectangle(x: float, y: float, width: float, height: float, arc: float) -> ShapeSpec:
    """
    Create a rectangle with rounded corners.

    ``arc`` is the corner radius. A non-positive radius gives a plain
    rectangle; a square whose radius reaches its full width gives a circle.
    """
    if arc <= 0:
        return ShapeSpec(ShapeKind.RECTANGLE, x, y, width, height)

    # Compared against the full width, not half of it
    if width == height and arc >= width:
        return ShapeSpec(ShapeKind.ELLIPSE, x, y, width, height)

    return ShapeSpec(ShapeKind.ROUNDED_RECTANGLE, x, y, width, height, arc_diameter=arc * 2)


def outline_shape(x: float, y: float, width: float, height: float,
                  outer_arc: float, line_width: float) -> ShapeSpec:
    """
    Create a ring-shaped outline of ``line_width`` around the given bounds.

    The outer and inner rounded rectangles are combined under the even-odd
    rule, so filling the result paints only the band between them.
    """
    if line_width <= 0 or width <= 0 or height <= 0:
        logger.debug(
            f"Empty outline for width={width}, height={height}, line_width={line_width}"
        )
        return ShapeSpec(ShapeKind.EMPTY)

    outer = rounded_rectangle(x, y, width, height, outer_arc)

    inner_width = width - line_width * 2
    inner_height = height - line_width * 2
    inner = None
    if inner_width > 0 and inner_height > 0:
        inner = rounded_rectangle(
            x + line_width,
            y + line_width,
            inner_width,
            inner_height,
            max(0, outer_arc - line_width),
        )

    return ShapeSpec(
        ShapeKind.COMPOUND_OUTLINE, x, y, width, height,
        arc_diameter=outer.arc_diameter, outer=outer, inner=inner,
    )
