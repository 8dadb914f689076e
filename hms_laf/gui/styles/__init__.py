"""
Styling and theming system for the GUI.
"""

from .themes import Theme, ThemeManager, apply_theme, get_theme_manager
from .dark_theme import DarkTheme
from .light_theme import LightTheme

__all__ = ["Theme", "ThemeManager", "apply_theme", "get_theme_manager", "DarkTheme", "LightTheme"]
