"""Shared test helpers and factory functions for siteify tests.

Import this module directly from test files::

    from _helpers import make_config_manager, write_health_files

Pytest fixtures that wrap these factories live in ``conftest.py``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from siteify.compile.batch import BatchConfig
from siteify.core.config import ConfigManager
from siteify.core.schema import DEFAULT_HEALTH_FILES


# ---------------------------------------------------------------------------
# ConfigManager factory
# ---------------------------------------------------------------------------


def make_config_manager(tmp_path: Path) -> ConfigManager:
    """Create a real ConfigManager pointed at a nonexistent config/env so defaults are used."""
    mgr = ConfigManager(project_root=tmp_path)
    mgr._config_path = tmp_path / "nonexistent.yaml"
    mgr._env_path = tmp_path / ".env"
    mgr.load()
    return mgr


def make_batch_config(tmp_path: Path, *, stop_on_failure: bool = True) -> BatchConfig:
    """A BatchConfig reading from ``tmp_path`` and writing to ``tmp_path/collections/_docs``."""
    return BatchConfig(
        source_dir=tmp_path,
        output_dir=tmp_path / "collections" / "_docs",
        stop_on_failure=stop_on_failure,
    )


# ---------------------------------------------------------------------------
# Health file factories
# ---------------------------------------------------------------------------


def write_health_file(directory: Path, filename: str, text: str | None = None) -> Path:
    """Write a health file; default content has a level-2 heading and a paragraph."""
    path = directory / filename
    stem = Path(filename).stem.replace("_", " ").title()
    path.write_text(text if text is not None else f"## {stem}\n\nSome {stem} text.\n", encoding="utf-8")
    return path


def write_health_files(directory: Path, *, skip: tuple[str, ...] = ()) -> list[Path]:
    """Write every built-in health file except the names in *skip*."""
    return [write_health_file(directory, name) for name in DEFAULT_HEALTH_FILES if name not in skip]


# ---------------------------------------------------------------------------
# Output parsing
# ---------------------------------------------------------------------------


def split_front_matter(document: str) -> tuple[dict[str, Any], str]:
    """Split a siteified document into (frontmatter dict, body)."""
    assert document.startswith("---\n")
    _, fm_text, rest = document.split("---\n", 2)
    assert rest.startswith("\n")
    return yaml.safe_load(fm_text), rest[1:]
