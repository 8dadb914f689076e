from abc import ABC, abstractmethod
from typing import Optional

from PySide6.QtGui import QColor, QPainter

from .models import HintValue, RenderHintKey, ShapeSpec, Stroke


class DrawingContext(ABC):
    """
    Abstract base class for a mutable 2D canvas.

    The context is owned by the caller; the rendering helpers only borrow it
    for the duration of one drawing call.
    """

    @abstractmethod
    def get_rendering_hint(self, key: RenderHintKey) -> Optional[HintValue]:
        """Return the current value of a hint, or None if it was never set."""
        pass

    @abstractmethod
    def set_rendering_hint(self, key: RenderHintKey, value: HintValue):
        """Set a rendering hint."""
        pass

    @abstractmethod
    def get_color(self) -> Optional[QColor]:
        """Return the foreground color."""
        pass

    @abstractmethod
    def set_color(self, color: QColor):
        """Set the foreground color used for fills, strokes and text."""
        pass

    @abstractmethod
    def get_stroke(self) -> Optional[Stroke]:
        """Return the current stroke."""
        pass

    @abstractmethod
    def set_stroke(self, stroke: Stroke):
        """Set the stroke used by draw()."""
        pass

    @abstractmethod
    def get_composite(self) -> Optional[QPainter.CompositionMode]:
        """Return the compositing mode."""
        pass

    @abstractmethod
    def set_composite(self, mode: QPainter.CompositionMode):
        """Set the compositing mode."""
        pass

    @abstractmethod
    def fill(self, shape: ShapeSpec):
        """Fill a shape with the current color."""
        pass

    @abstractmethod
    def draw(self, shape: ShapeSpec):
        """Stroke the outline of a shape with the current stroke and color."""
        pass

    @abstractmethod
    def draw_string(self, text: str, x: float, y: float):
        """Render text with its baseline starting at (x, y)."""
        pass
