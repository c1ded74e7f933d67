"""Shared test fixtures for closestmatch tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import structlog

from closestmatch.cli.context import CLIContext
from closestmatch.infrastructure.config import GlobalConfig
from closestmatch.infrastructure.paths import PathResolver

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


@pytest.fixture(autouse=True)
def clean_state() -> Generator[None]:
    """Reset the CLI singleton and structlog configuration around each test."""
    CLIContext.reset()
    yield
    CLIContext.reset()
    structlog.reset_defaults()


@pytest.fixture
def resolver(tmp_path: Path) -> PathResolver:
    """Path resolver rooted in a temporary directory."""
    return PathResolver(base=tmp_path / ".closestmatch")


@pytest.fixture
def default_config() -> GlobalConfig:
    """Install default config in the CLI context so no file is read."""
    config = GlobalConfig()
    CLIContext.get().config = config
    return config
