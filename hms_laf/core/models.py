"""Data models for shapes, strokes and rendering state."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

from PySide6.QtCore import QRectF, Qt
from PySide6.QtGui import QColor, QPainter, QPainterPath, QPen

if TYPE_CHECKING:
    from .interfaces import DrawingContext


class RenderHintKey(Enum):
    """Rendering hint keys understood by a drawing context."""
    ANTIALIASING = "antialiasing"
    STROKE_CONTROL = "stroke_control"
    TEXT_ANTIALIASING = "text_antialiasing"
    RENDERING = "rendering"


class HintValue(Enum):
    """Values a rendering hint can take. Each value belongs to exactly one key."""
    ANTIALIAS_ON = (RenderHintKey.ANTIALIASING, "on")
    ANTIALIAS_OFF = (RenderHintKey.ANTIALIASING, "off")
    STROKE_NORMALIZE = (RenderHintKey.STROKE_CONTROL, "normalize")
    STROKE_PURE = (RenderHintKey.STROKE_CONTROL, "pure")
    TEXT_ANTIALIAS_ON = (RenderHintKey.TEXT_ANTIALIASING, "on")
    TEXT_ANTIALIAS_OFF = (RenderHintKey.TEXT_ANTIALIASING, "off")
    RENDER_QUALITY = (RenderHintKey.RENDERING, "quality")
    RENDER_SPEED = (RenderHintKey.RENDERING, "speed")

    @property
    def key(self) -> RenderHintKey:
        """The hint key this value is valid for."""
        return self.value[0]


class ShapeKind(Enum):
    """Shape kind enumeration."""
    EMPTY = "empty"
    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    ROUNDED_RECTANGLE = "rounded_rectangle"
    COMPOUND_OUTLINE = "compound_outline"


@dataclass(frozen=True)
class ShapeSpec:
    """
    Geometric description of a shape to fill or stroke.

    Rounded rectangles keep their corner *diameter* (``arc_diameter``);
    ``corner_radius`` is derived from it. Compound outlines take their bounds
    from ``outer`` and are filled with the even-odd rule, so ``inner`` is cut
    out of ``outer``. ``inner`` is None when the inner shape collapsed.
    """
    kind: ShapeKind
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    arc_diameter: float = 0.0
    outer: Optional["ShapeSpec"] = None
    inner: Optional["ShapeSpec"] = None

    @property
    def corner_radius(self) -> float:
        return self.arc_diameter / 2

    @property
    def is_empty(self) -> bool:
        return self.kind is ShapeKind.EMPTY or self.width <= 0 or self.height <= 0

    @property
    def fill_rule(self) -> Qt.FillRule:
        if self.kind is ShapeKind.COMPOUND_OUTLINE:
            return Qt.FillRule.OddEvenFill
        return Qt.FillRule.WindingFill

    def bounds(self) -> QRectF:
        return QRectF(self.x, self.y, self.width, self.height)

    def to_path(self) -> QPainterPath:
        """Build the QPainterPath for this shape."""
        path = QPainterPath()
        path.setFillRule(self.fill_rule)

        if self.kind is ShapeKind.EMPTY:
            return path
        if self.kind is ShapeKind.RECTANGLE:
            path.addRect(self.bounds())
        elif self.kind is ShapeKind.ELLIPSE:
            path.addEllipse(self.bounds())
        elif self.kind is ShapeKind.ROUNDED_RECTANGLE:
            path.addRoundedRect(self.bounds(), self.corner_radius, self.corner_radius)
        elif self.kind is ShapeKind.COMPOUND_OUTLINE:
            path.addPath(self.outer.to_path())
            if self.inner is not None:
                path.addPath(self.inner.to_path())
            # addPath() does not carry the fill rule over
            path.setFillRule(Qt.FillRule.OddEvenFill)
        return path

    def area(self) -> float:
        """Analytic area of the filled region."""
        if self.kind is ShapeKind.COMPOUND_OUTLINE:
            inner_area = self.inner.area() if self.inner is not None else 0.0
            return self.outer.area() - inner_area
        if self.is_empty:
            return 0.0
        if self.kind is ShapeKind.ELLIPSE:
            return math.pi * self.width * self.height / 4
        if self.kind is ShapeKind.ROUNDED_RECTANGLE:
            # Corners are clamped per axis, as the toolkit does when painting
            rx = min(self.corner_radius, self.width / 2)
            ry = min(self.corner_radius, self.height / 2)
            return self.width * self.height - (4 - math.pi) * rx * ry
        return self.width * self.height


@dataclass(frozen=True)
class Stroke:
    """Line style used when stroking shapes."""
    width: float = 1.0
    cap_style: Qt.PenCapStyle = Qt.PenCapStyle.SquareCap
    join_style: Qt.PenJoinStyle = Qt.PenJoinStyle.MiterJoin

    def to_pen(self, color: QColor) -> QPen:
        pen = QPen(color)
        pen.setWidthF(self.width)
        pen.setCapStyle(self.cap_style)
        pen.setJoinStyle(self.join_style)
        return pen


@dataclass(frozen=True)
class QualitySnapshot:
    """Drawing-context state captured before a quality override."""
    antialiasing: Optional[HintValue] = None
    stroke_control: Optional[HintValue] = None
    color: Optional[QColor] = None
    stroke: Optional[Stroke] = None
    composite: Optional[QPainter.CompositionMode] = None

    @classmethod
    def capture(cls, context: "DrawingContext") -> "QualitySnapshot":
        """Read the current hint, color, stroke and composite values of a context."""
        return cls(
            antialiasing=context.get_rendering_hint(RenderHintKey.ANTIALIASING),
            stroke_control=context.get_rendering_hint(RenderHintKey.STROKE_CONTROL),
            color=context.get_color(),
            stroke=context.get_stroke(),
            composite=context.get_composite(),
        )
