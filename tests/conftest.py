"""
Pytest configuration and fixtures for look and feel tests.
"""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from hms_laf.utils.logging import setup_logging

setup_logging(level="DEBUG", log_file=None)

import pytest
from unittest.mock import Mock
from pathlib import Path
import tempfile
import shutil

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QImage, QPainter

from hms_laf.config import Config
from hms_laf.core.interfaces import DrawingContext
from hms_laf.core.models import Stroke


class RecordingContext(DrawingContext):
    """In-memory drawing context that records every draw call."""

    def __init__(self, hints=None, color=None, stroke=None, composite=None):
        self.hints = dict(hints or {})
        self.color = color
        self.stroke = stroke
        self.composite = composite
        self.operations = []

    def get_rendering_hint(self, key):
        return self.hints.get(key)

    def set_rendering_hint(self, key, value):
        self.hints[key] = value

    def get_color(self):
        return self.color

    def set_color(self, color):
        self.color = color

    def get_stroke(self):
        return self.stroke

    def set_stroke(self, stroke):
        self.stroke = stroke

    def get_composite(self):
        return self.composite

    def set_composite(self, mode):
        self.composite = mode

    def fill(self, shape):
        self.operations.append(("fill", shape, self.color, dict(self.hints)))

    def draw(self, shape):
        self.operations.append(("draw", shape, self.color, self.stroke, dict(self.hints)))

    def draw_string(self, text, x, y):
        self.operations.append(("text", text, x, y, self.color, dict(self.hints)))


@pytest.fixture
def recording_context():
    """A drawing context with color, stroke and composite set but no hints."""
    return RecordingContext(
        color=QColor(10, 20, 30),
        stroke=Stroke(3.0),
        composite=QPainter.CompositionMode.CompositionMode_SourceOver,
    )


@pytest.fixture
def make_context():
    """Factory for recording contexts with arbitrary initial state."""
    return RecordingContext


@pytest.fixture(scope="session")
def qt_app():
    """Create (or reuse) the Qt application for tests that need one."""
    from PySide6.QtWidgets import QApplication
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def canvas(qt_app):
    """A transparent 64x64 ARGB image with an active painter."""
    image = QImage(64, 64, QImage.Format.Format_ARGB32)
    image.fill(Qt.GlobalColor.transparent)
    painter = QPainter(image)
    yield image, painter
    if painter.isActive():
        painter.end()


@pytest.fixture
def sample_config():
    """Create a sample configuration for testing."""
    config = Config()
    config.rendering.corner_radius = 6.0
    config.rendering.border_width = 1.0
    return config


@pytest.fixture
def temp_directory():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield Path(temp_dir)
    shutil.rmtree(temp_dir)


@pytest.fixture
def mock_qt_app():
    """Create a mock Qt application for theme tests."""
    app = Mock()
    app.exec.return_value = 0
    return app


# Pytest markers
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "gui: marks tests that need a Qt application")
