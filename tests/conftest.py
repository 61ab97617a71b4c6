"""Shared pytest fixtures for shapecast tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no stray shapecast.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SHAPECAST_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the shapecast logger after each test."""
    pkg = logging.getLogger("shapecast")
    handlers = pkg.handlers[:]
    level = pkg.level
    propagate = pkg.propagate
    yield
    pkg.handlers = handlers
    pkg.setLevel(level)
    pkg.propagate = propagate
    structlog.contextvars.clear_contextvars()
