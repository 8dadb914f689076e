"""
Dark theme implementation.
"""

from PySide6.QtGui import QPalette, QColor

from .themes import Theme


class DarkTheme(Theme):
    """Dark look and feel."""

    def get_name(self) -> str:
        return "Dark"

    def get_palette(self) -> QPalette:
        """Create dark theme palette."""
        palette = QPalette()

        # Window colors
        palette.setColor(QPalette.Window, QColor(43, 45, 48))
        palette.setColor(QPalette.WindowText, QColor(223, 225, 229))

        # Base colors (for input fields, etc.)
        palette.setColor(QPalette.Base, QColor(30, 31, 34))
        palette.setColor(QPalette.AlternateBase, QColor(43, 45, 48))

        # Text colors
        palette.setColor(QPalette.Text, QColor(223, 225, 229))
        palette.setColor(QPalette.BrightText, QColor(255, 85, 85))

        # Button colors
        palette.setColor(QPalette.Button, QColor(57, 59, 64))
        palette.setColor(QPalette.ButtonText, QColor(223, 225, 229))

        # Selection colors
        palette.setColor(QPalette.Highlight, QColor(53, 116, 240))
        palette.setColor(QPalette.HighlightedText, QColor(255, 255, 255))

        # Tooltip colors
        palette.setColor(QPalette.ToolTipBase, QColor(30, 31, 34))
        palette.setColor(QPalette.ToolTipText, QColor(223, 225, 229))

        return palette

    def get_stylesheet(self) -> str:
        """Get dark theme stylesheet."""
        return """
        QMainWindow {
            background-color: #2b2d30;
        }

        QToolTip {
            background-color: #1e1f22;
            color: #dfe1e5;
            border: 1px solid #4e5157;
            border-radius: 4px;
            padding: 4px;
        }
        """

    def get_colors(self) -> dict:
        """Get theme color dictionary."""
        return {
            'primary': '#3574f0',
            'background': '#2b2d30',
            'surface': '#393b40',
            'border': '#4e5157',
            'text': '#dfe1e5',
            'text_secondary': '#9da0a8',
            'focus': '#3574f0',
        }
