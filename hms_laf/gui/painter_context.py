"""
DrawingContext implementation backed by a QPainter.
"""

from typing import Dict, Optional

from PySide6.QtCore import QPointF
from PySide6.QtGui import QBrush, QColor, QPainter, QPainterPath, QPen

from ..core.interfaces import DrawingContext
from ..core.models import HintValue, RenderHintKey, ShapeSpec, Stroke

# Hint keys that map onto a QPainter render-hint flag: (flag, on value, off value)
PAINTER_HINTS = {
    RenderHintKey.ANTIALIASING: (
        QPainter.RenderHint.Antialiasing, HintValue.ANTIALIAS_ON, HintValue.ANTIALIAS_OFF
    ),
    RenderHintKey.TEXT_ANTIALIASING: (
        QPainter.RenderHint.TextAntialiasing, HintValue.TEXT_ANTIALIAS_ON, HintValue.TEXT_ANTIALIAS_OFF
    ),
    RenderHintKey.RENDERING: (
        QPainter.RenderHint.SmoothPixmapTransform, HintValue.RENDER_QUALITY, HintValue.RENDER_SPEED
    ),
}


class QPainterContext(DrawingContext):
    """
    Borrow an active QPainter as a DrawingContext.

    Stroke control has no QPainter flag, so it is tracked here and reads as
    None until it is first set. With STROKE_NORMALIZE, strokes of an odd
    whole-pixel width are shifted half a pixel onto pixel centers.
    """

    def __init__(self, painter: QPainter):
        self.painter = painter
        pen = painter.pen()
        self._color = QColor(pen.color())
        self._stroke = Stroke(pen.widthF())
        self._hints: Dict[RenderHintKey, HintValue] = {}

    def get_rendering_hint(self, key: RenderHintKey) -> Optional[HintValue]:
        if key in PAINTER_HINTS:
            flag, on_value, off_value = PAINTER_HINTS[key]
            return on_value if self.painter.testRenderHint(flag) else off_value
        return self._hints.get(key)

    def set_rendering_hint(self, key: RenderHintKey, value: HintValue):
        if value.key is not key:
            raise ValueError(f"{value.name} is not a valid value for {key.name}")
        if key in PAINTER_HINTS:
            flag, on_value, _ = PAINTER_HINTS[key]
            self.painter.setRenderHint(flag, value is on_value)
        else:
            self._hints[key] = value

    def get_color(self) -> Optional[QColor]:
        return QColor(self._color)

    def set_color(self, color: QColor):
        self._color = QColor(color)

    def get_stroke(self) -> Optional[Stroke]:
        return self._stroke

    def set_stroke(self, stroke: Stroke):
        self._stroke = stroke

    def get_composite(self) -> Optional[QPainter.CompositionMode]:
        return self.painter.compositionMode()

    def set_composite(self, mode: QPainter.CompositionMode):
        self.painter.setCompositionMode(mode)

    def fill(self, shape: ShapeSpec):
        if shape.is_empty:
            return
        self.painter.fillPath(shape.to_path(), QBrush(self._color))

    def draw(self, shape: ShapeSpec):
        if shape.is_empty:
            return
        self.painter.strokePath(self._normalized(shape.to_path()), self._stroke.to_pen(self._color))

    def draw_string(self, text: str, x: float, y: float):
        self.painter.save()
        try:
            self.painter.setPen(QPen(self._color))
            self.painter.drawText(QPointF(x, y), text)
        finally:
            self.painter.restore()

    def _normalized(self, path: QPainterPath) -> QPainterPath:
        if self._hints.get(RenderHintKey.STROKE_CONTROL) is not HintValue.STROKE_NORMALIZE:
            return path
        width = self._stroke.width
        if width > 0 and width == int(width) and int(width) % 2 == 1:
            return path.translated(0.5, 0.5)
        return path
