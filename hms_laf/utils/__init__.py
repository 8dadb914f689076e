"""
Utility modules and helper functions.
"""

from .logging import get_logger, setup_logging, get_log_file_path

__all__ = ["get_logger", "setup_logging", "get_log_file_path"]
