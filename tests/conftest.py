"""Pytest configuration and fixtures."""

import logging
from pathlib import Path

import pytest

from fountainkit.config import FountainKitSettings, reset_settings, set_settings
from fountainkit.parser import FountainParser

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "fountain"

_ENV_VARS = (
    "FOUNTAINKIT_MERGE_ACTIONS",
    "FOUNTAINKIT_MERGE_DIALOGUE",
    "FOUNTAINKIT_ENCODING",
    "FOUNTAINKIT_DEBUG",
    "FOUNTAINKIT_LOG_LEVEL",
    "FOUNTAINKIT_LOG_FORMAT",
    "FOUNTAINKIT_LOG_FILE",
)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


@pytest.fixture(autouse=True)
def isolated_test_environment(tmp_path, monkeypatch):
    """Run every test with default settings and no FOUNTAINKIT_ variables.

    Variables are registered with monkeypatch before removal so that values
    written by the CLI callback during a test are rolled back afterwards.
    """
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)

    reset_settings()
    set_settings(FountainKitSettings())

    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    reset_settings()
    root_logger.setLevel(original_level)
    for handler in root_logger.handlers.copy():
        if handler not in original_handlers:
            root_logger.removeHandler(handler)
    for handler in original_handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding sample Fountain files."""
    return FIXTURES_DIR


@pytest.fixture
def parse_lines():
    """Parse a list of lines with a fresh parser and return the document."""

    def _parse(lines, **options):
        return FountainParser(**options).feed_all(lines)

    return _parse
