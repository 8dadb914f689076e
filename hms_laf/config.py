"""
Configuration management for the HMS look and feel.
"""

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Dict, Any, Optional

from .utils.logging import get_logger


@dataclass
class UIConfig:
    """Configuration for the user interface."""
    theme: str = "light"
    window_width: int = 640
    window_height: int = 420


@dataclass
class RenderingConfig:
    """Geometry used when painting themed surfaces."""
    corner_radius: float = 8.0
    border_width: float = 1.0
    focus_ring_width: float = 2.0


@dataclass
class LoggingConfig:
    """Configuration for logging."""
    level: str = "INFO"
    file_path: str = "hms_laf.log"
    max_file_size: int = 5 * 1024 * 1024
    backup_count: int = 3


class Config:
    """Main configuration class."""

    def __init__(self):
        self.ui = UIConfig()
        self.rendering = RenderingConfig()
        self.logging = LoggingConfig()

        self.logger = get_logger(__name__)

    @classmethod
    def load_from_file(cls, config_path: Optional[str] = None) -> 'Config':
        """Load configuration from file, falling back to defaults."""
        if config_path is None:
            config_path = cls.get_default_config_path()

        config_file = Path(config_path)
        config = cls()

        if config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)

                config._update_from_dict(data)
                config.logger.info(f"Config loaded from {config_file}")

            except Exception as e:
                config.logger.warning(f"Failed to load config from {config_file}: {e}")
                config.logger.info("Using default configuration")
        else:
            config.logger.info("No config file found, using defaults")

        return config

    def save_to_file(self, config_path: Optional[str] = None):
        """Save configuration to file."""
        if config_path is None:
            config_path = self.get_default_config_path()

        config_file = Path(config_path)

        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w', encoding='utf-8') as f:
                json.dump(self.to_dict(), f, indent=2)

            self.logger.info(f"Config saved to {config_file}")

        except OSError as e:
            self.logger.error(f"Failed to save config to {config_file}: {e}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'ui': asdict(self.ui),
            'rendering': asdict(self.rendering),
            'logging': asdict(self.logging),
        }

    def _update_from_dict(self, data: Dict[str, Any]):
        """Update configuration from dictionary."""
        if not isinstance(data, dict):
            raise ValueError(f"expected a JSON object, got {type(data).__name__}")

        for section in ("ui", "rendering", "logging"):
            if section not in data:
                continue
            if not isinstance(data[section], dict):
                self.logger.warning(f"Ignoring config section '{section}': expected an object")
                continue
            self._update_dataclass(getattr(self, section), data[section])

    def _update_dataclass(self, instance, data: Dict[str, Any]):
        """Update a dataclass instance from dictionary, keeping the field types."""
        names = {field.name for field in fields(instance)}
        for key, value in data.items():
            if key not in names:
                continue

            current = getattr(instance, key)
            # JSON has no separate float type
            if isinstance(current, float) and isinstance(value, int) and not isinstance(value, bool):
                value = float(value)

            if type(value) is not type(current):
                self.logger.warning(
                    f"Ignoring config value {type(instance).__name__}.{key}={value!r}: "
                    f"expected {type(current).__name__}"
                )
                continue
            setattr(instance, key, value)

    @staticmethod
    def get_default_config_path() -> str:
        """Get the default configuration file path."""
        config_dir = Path.home() / ".config" / "hms_laf"
        return str(config_dir / "config.json")

    def validate(self) -> bool:
        """
        Validate configuration values, auto-fixing the ones out of range.

        Returns False only for values that cannot be fixed.
        """
        errors = []
        fixed_values = []
        defaults = RenderingConfig()

        if self.rendering.corner_radius < 0:
            self.rendering.corner_radius = 0.0
            fixed_values.append("corner_radius auto-fixed to 0")

        if self.rendering.border_width <= 0:
            self.rendering.border_width = defaults.border_width
            fixed_values.append(f"border_width auto-fixed to {defaults.border_width}")

        if self.rendering.focus_ring_width <= 0:
            self.rendering.focus_ring_width = defaults.focus_ring_width
            fixed_values.append(f"focus_ring_width auto-fixed to {defaults.focus_ring_width}")

        if self.ui.window_width <= 0 or self.ui.window_height <= 0:
            self.ui.window_width = UIConfig.window_width
            self.ui.window_height = UIConfig.window_height
            fixed_values.append("window size auto-fixed to defaults")

        if not isinstance(logging.getLevelName(self.logging.level.upper()), int):
            errors.append(f"unknown logging level '{self.logging.level}'")

        for fix in fixed_values:
            self.logger.info(f"Config auto-fix: {fix}")

        for error in errors:
            self.logger.error(f"Config validation error: {error}")

        return not errors
