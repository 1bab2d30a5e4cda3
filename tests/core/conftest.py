"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing core functionality,
including the fixture files under testdata/, in-memory I/O handlers and
progress displays.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.file_io import MockIOHandler
from core.models import Options
from ui.progress_display import NoOpProgressDisplay

TESTDATA_DIR = Path(__file__).parent / "testdata"


@pytest.fixture
def read_testdata():
    """Factory reading a fixture file from testdata/ with untranslated newlines."""

    def _read(name: str) -> str:
        with open(TESTDATA_DIR / name, "r", encoding="utf-8", newline="") as f:
            return f.read()

    return _read


@pytest.fixture
def target_license(read_testdata):
    """The canonical block comment license header."""
    return read_testdata("target_license_header.txt")


@pytest.fixture
def project_root():
    """Root of the in-memory project tree."""
    return Path("project")


@pytest.fixture
def options_factory(project_root):
    """Factory for Options rooted at the in-memory project."""

    def _factory(**overrides):
        values = {
            "path": project_root,
            "license_path": Path("license.txt"),
            "extensions": (".js",),
        }
        values.update(overrides)
        return Options(**values)

    return _factory


@pytest.fixture
def io_handler_factory(target_license):
    """
    Factory for MockIOHandler instances serving the canonical license at
    "license.txt" next to the given files.
    """

    def _factory(files=None, license_text=None, **kwargs):
        walked = list(files or {})
        contents = {"license.txt": target_license if license_text is None else license_text}
        contents.update(files or {})
        kwargs.setdefault("walk_paths", walked)
        return MockIOHandler(files=contents, **kwargs)

    return _factory


@pytest.fixture
def progress_display():
    """Progress display for testing."""
    return NoOpProgressDisplay()


@pytest.fixture
def tracking_progress_display():
    """Progress display that tracks calls for testing."""
    mock = MagicMock()
    mock.calls = []

    def make_tracker(method_name):
        def tracker(*args, **kwargs):
            if method_name == "update":
                mock.calls.append((method_name, kwargs.get("advance")))
            else:
                mock.calls.append((method_name, *args, *kwargs.values()))

        return tracker

    mock.on_start = make_tracker("start")
    mock.on_update = make_tracker("update")
    mock.on_complete = make_tracker("complete")
    mock.__enter__ = MagicMock(return_value=mock)
    mock.__exit__ = MagicMock(return_value=None)

    return mock
