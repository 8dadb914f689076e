"""
Light theme implementation.
"""

from PySide6.QtGui import QPalette, QColor

from .themes import Theme


class LightTheme(Theme):
    """Default light look and feel."""

    def get_name(self) -> str:
        return "Light"

    def get_palette(self) -> QPalette:
        """Create light theme palette."""
        palette = QPalette()

        # Window colors
        palette.setColor(QPalette.Window, QColor(244, 245, 247))
        palette.setColor(QPalette.WindowText, QColor(33, 37, 41))

        # Base colors
        palette.setColor(QPalette.Base, QColor(255, 255, 255))
        palette.setColor(QPalette.AlternateBase, QColor(248, 249, 250))

        # Text colors
        palette.setColor(QPalette.Text, QColor(33, 37, 41))
        palette.setColor(QPalette.BrightText, QColor(255, 255, 255))
        palette.setColor(QPalette.PlaceholderText, QColor(108, 117, 125))

        # Button colors
        palette.setColor(QPalette.Button, QColor(233, 236, 239))
        palette.setColor(QPalette.ButtonText, QColor(33, 37, 41))

        # Selection colors
        palette.setColor(QPalette.Highlight, QColor(13, 110, 253))
        palette.setColor(QPalette.HighlightedText, QColor(255, 255, 255))

        return palette

    def get_stylesheet(self) -> str:
        """Get light theme stylesheet."""
        return """
        QMainWindow {
            background-color: #f4f5f7;
        }

        QToolTip {
            background-color: #ffffff;
            color: #212529;
            border: 1px solid #dee2e6;
            border-radius: 4px;
            padding: 4px;
        }
        """

    def get_colors(self) -> dict:
        """Get theme color dictionary."""
        return {
            'primary': '#0d6efd',
            'background': '#f4f5f7',
            'surface': '#ffffff',
            'border': '#dee2e6',
            'text': '#212529',
            'text_secondary': '#6c757d',
            'focus': '#86b7fe',
        }
