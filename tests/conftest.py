"""Shared pytest fixtures for reckon tests."""

import logging

import pytest
from typer.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_reckon_logger():
    """CLI runs reconfigure logging; keep the package logger level per-test."""
    logger = logging.getLogger("reckon")
    level = logger.level
    yield
    logger.setLevel(level)
