"""Shared pytest fixtures and test helpers for getflowkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from getflowkit.core.errors import DomainError, NetworkError


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore the getflowkit logger after each test.

    The CLI and configure_logging() replace its handlers; handlers bound to
    a finished CliRunner stream must not leak into later tests.
    """
    kit = logging.getLogger("getflowkit")
    handlers, level, propagate = kit.handlers[:], kit.level, kit.propagate
    yield
    kit.handlers[:] = handlers
    kit.setLevel(level)
    kit.propagate = propagate


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no config env var set.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` so a
    getflowkit.toml higher up the real filesystem is never picked up.
    """
    monkeypatch.delenv("GETFLOWKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def network_error() -> DomainError:
    return NetworkError("connection reset", status_code=503)


@pytest.fixture
def other_error() -> DomainError:
    return DomainError("something else")
