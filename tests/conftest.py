"""Shared pytest fixtures for siteify tests.

Factory functions live in ``_helpers.py``; this module re-exports them as
pytest fixtures so tests can receive them via dependency injection.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from siteify.compile.batch import BatchConfig
from siteify.core.config import ConfigManager

from _helpers import (  # noqa: F401 - re-export for fixture use
    make_batch_config,
    make_config_manager,
    split_front_matter,
    write_health_file,
    write_health_files,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def config_manager(tmp_path: Path) -> ConfigManager:
    """A real ConfigManager backed by default config (no YAML/env file)."""
    return make_config_manager(tmp_path)


@pytest.fixture()
def output_dir(tmp_path: Path) -> Path:
    """Collection directory inside tmp_path (not created up front)."""
    return tmp_path / "collections" / "_docs"


@pytest.fixture()
def batch_config(tmp_path: Path) -> BatchConfig:
    """Abort-on-first-error batch config rooted at tmp_path."""
    return make_batch_config(tmp_path)
