"""
Pytest configuration for Quill Layout
"""

import pytest
import logging
import sys

from quill_layout.config import LayoutConfig
from quill_layout.document import Document
from quill_layout.layout.context import LayoutContext


@pytest.fixture(autouse=True)
def configure_logging():
    """Configure logging for tests to avoid file handler issues."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)  # Only show warnings and errors during tests

    formatter = logging.Formatter(
        '%(name)s - %(levelname)s - %(message)s'
    )
    console_handler.setFormatter(formatter)

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()


@pytest.fixture
def config():
    """US Letter in points with one inch margins (margin box 468x648 at (72, 720))."""
    return LayoutConfig.from_dict({"page_size": (612, 792), "margins": 72})


@pytest.fixture
def flat_config():
    """US Letter without margins, so local and absolute coordinates match."""
    return LayoutConfig.from_dict({"page_size": (612, 792), "margins": 0})


@pytest.fixture
def context(config):
    """Layout context with one started page."""
    ctx = LayoutContext(config)
    ctx.start_new_page()
    return ctx


@pytest.fixture
def flat_context(flat_config):
    ctx = LayoutContext(flat_config)
    ctx.start_new_page()
    return ctx


@pytest.fixture
def document(config):
    return Document(config)
