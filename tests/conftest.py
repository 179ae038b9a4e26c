"""Pytest configuration and fixtures."""

import logging

import pytest

from flowsafe.config.manager import ConfigManager
from flowsafe.normalize.inputs import StaticSource
from flowsafe.output import formatter


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config lookups at an empty temporary home and reset cached state."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(home)

    ConfigManager._config = None
    formatter._formatter = None
    yield home
    ConfigManager._config = None
    formatter._formatter = None
    package_logger = logging.getLogger("flowsafe")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def items_source():
    """Input source with two well-formed workflow items."""
    return StaticSource(
        [
            {"json": {"title": "Q3 report", "pages": 12}, "binary": {"file": "report.pdf"}},
            {"json": {"title": "Q4 report", "pages": 9}},
        ]
    )
