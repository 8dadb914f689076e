"""
Application class that selects the look and feel and shows the preview.
"""

import sys
import logging
from typing import Optional

from PySide6.QtWidgets import QApplication

from .config import Config
from .gui.preview import PreviewWindow
from .gui.styles.themes import apply_theme
from .utils.logging import get_logger, get_log_file_path, setup_logging


class LookAndFeelApp:
    """Creates the Qt application, applies the theme and runs the event loop."""

    def __init__(self, config: Config):
        self.config = config
        self.logger = get_logger(__name__)
        self.qt_app: Optional[QApplication] = None
        self.main_window: Optional[PreviewWindow] = None

    def run(self) -> int:
        """Run the application and return exit code."""
        try:
            self.logger.info("Initializing Qt application...")

            self.qt_app = QApplication.instance() or QApplication(sys.argv)
            self.qt_app.setStyle('Fusion')

            # A theme that cannot be applied is logged, not fatal
            if not apply_theme(self.qt_app, self.config.ui.theme):
                self.logger.warning(f"Theme '{self.config.ui.theme}' unavailable, using default")

            self.main_window = PreviewWindow(self.config)
            self.main_window.show()

            self.logger.info("Application started successfully")
            return self.qt_app.exec()

        except Exception as e:
            self.logger.error(f"Failed to start application: {e}")
            return 1

    def get_version(self) -> str:
        """Get application version."""
        from . import __version__
        return __version__


def main() -> int:
    """Main application entry point."""
    try:
        setup_logging()
        logger = logging.getLogger(__name__)
        logger.info("Starting HMS Look and Feel preview...")

        config = Config.load_from_file()
        if not config.validate():
            logger.error("Configuration validation failed")
            return 1

        setup_logging(
            level=config.logging.level,
            log_file=config.logging.file_path,
            max_bytes=config.logging.max_file_size,
            backup_count=config.logging.backup_count,
            force=True,
        )
        logger.info(f"Log file: {get_log_file_path()}")

        exit_code = LookAndFeelApp(config).run()

        logger.info("Application shutting down")
        return exit_code

    except KeyboardInterrupt:
        print("\nApplication interrupted by user")
        return 0
    except Exception as e:
        print(f"Fatal error: {e}")
        logging.exception("Fatal error occurred")
        return 1
