"""Pydantic models shared by the compile tasks and the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class HealthFile(BaseModel):
    """A community health file and the frontmatter overrides applied to it."""

    filename: str = Field(min_length=1)
    overrides: dict[str, Any] = Field(default_factory=dict)


class WriteResult(BaseModel):
    """Outcome of siteifying a single health file."""

    source: Path
    destination: Path
    slug: str
    frontmatter: dict[str, Any] = Field(default_factory=dict)
    changed: bool = True


class BatchError(BaseModel):
    """A health file that could not be processed in a continue-on-error batch."""

    filename: str
    message: str


class BatchResult(BaseModel):
    """Aggregate result of a batch run."""

    results: list[WriteResult] = Field(default_factory=list)
    errors: list[BatchError] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def written(self) -> list[Path]:
        return [r.destination for r in self.results]


# Processing order is the insertion order.
DEFAULT_HEALTH_FILES: dict[str, dict[str, Any]] = {
    "CODE_OF_CONDUCT.md": {
        "title": "OpenINF Code of Conduct",
        "editable": False,
    },
    "CONTRIBUTING.md": {
        "title": "Contributing to OpenINF",
        "permalink": "/docs/dev/internals/contributing/",
    },
    "SECURITY.md": {
        "title": "OpenINF Security Policies",
        "permalink": "/docs/dev/internals/security/",
    },
    "SUPPORT.md": {
        "title": "Support • Frequently Asked Questions",
        "permalink": "/docs/dev/faq/support/",
        "redirect_from": "/docs/dev/faq/help/",
    },
    "VISION.md": {
        "title": "OpenINF Vision",
        "permalink": "/about/vision/",
    },
}


def default_health_files() -> list[HealthFile]:
    """Return the built-in health file table as HealthFile models (fresh copies)."""
    return [
        HealthFile(filename=name, overrides=dict(overrides))
        for name, overrides in DEFAULT_HEALTH_FILES.items()
    ]
