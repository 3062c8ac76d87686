"""
Pytest configuration for HTML Interpreter
"""

import logging
import sys
from pathlib import Path

import pytest

from html_interpreter.engine.geometry import Size
from html_interpreter.renderers.base_writer import IDocumentWriter


class RecordingWriter(IDocumentWriter):
    """Document writer that records every call made by the flow renderer."""

    def __init__(self, width: float = 500.0, height: float = 700.0):
        self._bounds = Size(width=width, height=height)
        self.calls = []

    @property
    def bounds(self) -> Size:
        return self._bounds

    def advance_cursor(self, amount):
        self.calls.append(("advance_cursor", amount))

    def start_new_page(self):
        self.calls.append(("start_new_page",))

    def put(self, runs, options, bounding_box=None):
        self.calls.append(("put", list(runs), dict(options), bounding_box))

    def horizontal_rule(self, color=None, dash=None):
        self.calls.append(("horizontal_rule", color, dash))

    def image(self, src, options):
        self.calls.append(("image", src, dict(options)))

    def named(self, name):
        return [call for call in self.calls if call[0] == name]

    @property
    def puts(self):
        return self.named("put")

    @staticmethod
    def text_of(put_call):
        return "".join(run.text for run in put_call[1])


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter('%(name)s - %(levelname)s - %(message)s'))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    import tempfile
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def writer():
    """Recording document writer with a 500 x 700 pt writable area."""
    return RecordingWriter()


@pytest.fixture
def sample_png(temp_dir):
    """Write a small PNG image and return its path."""
    from PIL import Image

    path = temp_dir / "sample.png"
    Image.new("RGB", (40, 20), color=(200, 30, 30)).save(path)
    return path


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
