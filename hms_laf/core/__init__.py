"""
Shape generation and high-quality drawing helpers.
"""

from .models import (HintValue, QualitySnapshot, RenderHintKey, ShapeKind,
                     ShapeSpec, Stroke)
from .interfaces import DrawingContext
from .shapes import outline_shape, rounded_rectangle
from .rendering import RenderingSession, setup_high_quality_rendering
from .drawing import (draw_text, fill_outline, fill_rounded_rectangle,
                      stroke_rounded_rectangle)

__all__ = [
    "HintValue", "QualitySnapshot", "RenderHintKey", "ShapeKind", "ShapeSpec", "Stroke",
    "DrawingContext",
    "outline_shape", "rounded_rectangle",
    "RenderingSession", "setup_high_quality_rendering",
    "draw_text", "fill_outline", "fill_rounded_rectangle", "stroke_rounded_rectangle",
]
