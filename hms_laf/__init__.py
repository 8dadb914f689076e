"""
HMS Look and Feel - high-quality shape rendering for the Qt user interface
"""

__version__ = "1.0.0"
__author__ = "HMS UI Team"
__email__ = "ui-team@example.com"


def get_info() -> dict:
    """Returns basic package information."""
    return {
        "name": "HMS Look and Feel",
        "version": __version__,
        "description": "Shape helpers and scoped high-quality rendering for QPainter.",
        "author": __author__,
        "email": __email__,
    }


from .core.models import (HintValue, QualitySnapshot, RenderHintKey, ShapeKind,
                          ShapeSpec, Stroke)
from .core.interfaces import DrawingContext
from .core.shapes import outline_shape, rounded_rectangle
from .core.rendering import RenderingSession, setup_high_quality_rendering
from .core.drawing import (draw_text, fill_outline, fill_rounded_rectangle,
                           stroke_rounded_rectangle)

__all__ = [
    # Version and Info
    "__version__",
    "get_info",

    # Models
    "HintValue", "QualitySnapshot", "RenderHintKey", "ShapeKind", "ShapeSpec", "Stroke",

    # Interfaces
    "DrawingContext",

    # Shapes and drawing
    "outline_shape", "rounded_rectangle",
    "RenderingSession", "setup_high_quality_rendering",
    "draw_text", "fill_outline", "fill_rounded_rectangle", "stroke_rounded_rectangle",
]
