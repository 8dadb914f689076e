"""
Preview of the look and feel, painted with the drawing helpers.
"""

from typing import Optional

from PySide6.QtGui import QColor, QPainter
from PySide6.QtWidgets import QMainWindow, QWidget

from .painter_context import QPainterContext
from .styles.light_theme import LightTheme
from .styles.themes import Theme, get_theme_manager
from ..config import Config, RenderingConfig
from ..core.drawing import (draw_text, fill_outline, fill_rounded_rectangle,
                            stroke_rounded_rectangle)

MARGIN = 24
PADDING = 20
BADGE_SIZE = 40
BUTTON_WIDTH = 120
BUTTON_HEIGHT = 32


class PreviewWidget(QWidget):
    """Paints a themed card, a button with a focus ring and a badge."""

    def __init__(self, config: RenderingConfig, theme: Optional[Theme] = None, parent=None):
        super().__init__(parent)
        self.config = config
        self.theme = theme
        self.setMinimumSize(360, 200)

    def current_theme(self) -> Theme:
        if self.theme is not None:
            return self.theme
        return get_theme_manager().get_current_theme() or LightTheme()

    def paintEvent(self, event):
        painter = QPainter(self)
        try:
            self.paint_preview(painter, self.width(), self.height())
        finally:
            painter.end()

    def paint_preview(self, painter: QPainter, width: int, height: int):
        """Paint the preview onto any active painter."""
        theme = self.current_theme()
        context = QPainterContext(painter)
        radius = self.config.corner_radius

        # Card
        card_width = width - MARGIN * 2
        card_height = height - MARGIN * 2
        fill_rounded_rectangle(context, MARGIN, MARGIN, card_width, card_height,
                               radius, theme.color('surface'))
        stroke_rounded_rectangle(context, MARGIN, MARGIN, card_width, card_height,
                                 radius, theme.color('border'), self.config.border_width)

        left = MARGIN + PADDING
        draw_text(context, "HMS Look and Feel", left, MARGIN + 36, theme.color('text'))
        draw_text(context, f"Corner radius {radius:g}px", left, MARGIN + 56,
                  theme.color('text_secondary'))

        # A square whose radius reaches its width paints as a circle
        badge_x = MARGIN + card_width - PADDING - BADGE_SIZE
        fill_rounded_rectangle(context, badge_x, MARGIN + PADDING, BADGE_SIZE, BADGE_SIZE,
                               BADGE_SIZE, theme.color('primary'))

        button_y = MARGIN + 76
        fill_rounded_rectangle(context, left, button_y, BUTTON_WIDTH, BUTTON_HEIGHT,
                               BUTTON_HEIGHT / 2, theme.color('primary'))
        draw_text(context, "Continue", left + 30, button_y + 21, QColor("#ffffff"))

        ring = self.config.focus_ring_width
        gap = 1
        fill_outline(
            context,
            left - ring - gap,
            button_y - ring - gap,
            BUTTON_WIDTH + (ring + gap) * 2,
            BUTTON_HEIGHT + (ring + gap) * 2,
            BUTTON_HEIGHT / 2 + ring + gap,
            ring,
            theme.color('focus'),
        )


class PreviewWindow(QMainWindow):
    """Main window hosting the preview."""

    def __init__(self, config: Config):
        super().__init__()
        self.config = config
        self.setWindowTitle("HMS Look and Feel")
        self.resize(config.ui.window_width, config.ui.window_height)

        self.preview = PreviewWidget(config.rendering, parent=self)
        self.setCentralWidget(self.preview)
