"""Shared pytest fixtures and test helpers for headr tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test.

    The CLI points the log handler at the runner's stderr, which is closed
    once the invocation returns.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    headr = logging.getLogger("headr")
    headr_level = headr.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    headr.setLevel(headr_level)


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change CWD to a temp directory so sources can be named relatively."""
    monkeypatch.chdir(tmp_path)
    return tmp_path

