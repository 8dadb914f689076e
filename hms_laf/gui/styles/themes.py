"""
Theme management for the look and feel.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional

from PySide6.QtWidgets import QApplication
from PySide6.QtGui import QColor, QPalette

DEFAULT_THEME = "light"


class Theme(ABC):
    """Abstract base class for application themes."""

    @abstractmethod
    def get_name(self) -> str:
        """Get theme name."""
        pass

    @abstractmethod
    def get_palette(self) -> QPalette:
        """Get the color palette for this theme."""
        pass

    @abstractmethod
    def get_stylesheet(self) -> str:
        """Get additional stylesheet for this theme."""
        pass

    @abstractmethod
    def get_colors(self) -> Dict[str, str]:
        """Get the named colors custom painting uses."""
        pass

    def color(self, name: str) -> QColor:
        """Get a named theme color as a QColor."""
        return QColor(self.get_colors()[name])


class ThemeManager:
    """Manage application themes."""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.themes = {}
        self.current_theme: Optional[Theme] = None
        self._register_default_themes()

    def _register_default_themes(self):
        """Register default themes."""
        from .dark_theme import DarkTheme
        from .light_theme import LightTheme

        self.register_theme(LightTheme())
        self.register_theme(DarkTheme())

    def register_theme(self, theme: Theme):
        """Register a new theme."""
        self.themes[theme.get_name().lower()] = theme
        self.logger.info(f"Registered theme: {theme.get_name()}")

    def get_theme(self, name: str) -> Theme:
        """Get a theme by name."""
        name_lower = name.lower()
        if name_lower not in self.themes:
            raise ValueError(f"Theme '{name}' not found")
        return self.themes[name_lower]

    def list_themes(self) -> list:
        """Get list of available theme names."""
        return list(self.themes.keys())

    def apply_theme(self, app: QApplication, theme_name: str) -> bool:
        """
        Apply a theme to the application.

        Failure is not fatal: it is logged and the default theme is applied
        instead. Returns True if the requested theme was applied.
        """
        try:
            theme = self.get_theme(theme_name)

            app.setPalette(theme.get_palette())

            stylesheet = theme.get_stylesheet()
            if stylesheet:
                app.setStyleSheet(stylesheet)

            self.current_theme = theme
            self.logger.info(f"Applied theme: {theme.get_name()}")
            return True

        except Exception as e:
            self.logger.error(f"Failed to apply theme '{theme_name}': {e}")
            if theme_name.lower() != DEFAULT_THEME:
                self.apply_theme(app, DEFAULT_THEME)
            return False

    def get_current_theme(self) -> Optional[Theme]:
        """Get currently applied theme."""
        return self.current_theme


_theme_manager: Optional[ThemeManager] = None


def get_theme_manager() -> ThemeManager:
    """Get the global theme manager."""
    global _theme_manager
    if _theme_manager is None:
        _theme_manager = ThemeManager()
    return _theme_manager


def apply_theme(app: QApplication, theme_name: str = DEFAULT_THEME) -> bool:
    """Apply a theme to the application."""
    return get_theme_manager().apply_theme(app, theme_name)
