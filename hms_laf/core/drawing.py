"""
Drawing helpers that render with high quality and leave the context as found.
"""

from PySide6.QtGui import QColor

from .interfaces import DrawingContext
from .models import Stroke
from .rendering import setup_high_quality_rendering
from .shapes import outline_shape, rounded_rectangle


def fill_rounded_rectangle(context: DrawingContext, x: float, y: float,
                           width: float, height: float, arc: float, fill_color: QColor):
    with setup_high_quality_rendering(context):
        context.set_color(fill_color)
        context.fill(rounded_rectangle(x, y, width, height, arc))


def draw_text(context: DrawingContext, text: str, x: float, y: float, color: QColor):
    """Draw ``text`` with its baseline at (x, y)."""
    with setup_high_quality_rendering(context):
        context.set_color(color)
        context.draw_string(text, x, y)


def stroke_rounded_rectangle(context: DrawingContext, x: float, y: float,
                             width: float, height: float, arc: float,
                             color: QColor, stroke_width: float):
    with setup_high_quality_rendering(context):
        context.set_color(color)
        context.set_stroke(Stroke(stroke_width))
        context.draw(rounded_rectangle(x, y, width, height, arc))


def fill_outline(context: DrawingContext, x: float, y: float, width: float, height: float,
                 outer_arc: float, line_width: float, color: QColor):
    """
    Paint a ``line_width`` thick border inside the given bounds by filling
    an outline shape, without native stroking.
    """
    with setup_high_quality_rendering(context):
        shape = outline_shape(x, y, width, height, outer_arc, line_width)
        if shape.is_empty:
            return
        context.set_color(color)
        context.fill(shape)
