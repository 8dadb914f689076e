"""
Qt integration: QPainter drawing context, themes and the preview window.
"""

from .painter_context import QPainterContext

__all__ = ["QPainterContext"]
