"""Batch driver: siteify the repository's health files in a fixed order."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from siteify.compile.health_files import synthesize
from siteify.core.exceptions import MissingInputError
from siteify.core.schema import BatchError, BatchResult, HealthFile

log = logging.getLogger(__name__)


def overrides_for(filename: str, health_files: Iterable[HealthFile]) -> dict[str, Any]:
    """Return the overrides configured for *filename* (exact match), or an empty dict."""
    for health_file in health_files:
        if health_file.filename == filename:
            return dict(health_file.overrides)
    return {}


def select_health_files(names: Iterable[str], health_files: list[HealthFile]) -> list[HealthFile]:
    """Build a batch for *names*, taking overrides from *health_files* where known."""
    return [HealthFile(filename=name, overrides=overrides_for(name, health_files)) for name in names]


@dataclass
class BatchConfig:
    """Configuration for a batch run."""

    source_dir: Path
    output_dir: Path
    permalink_prefix: str = "/docs/"
    stop_on_failure: bool = True


def siteify_all(health_files: list[HealthFile], config: BatchConfig) -> BatchResult:
    """
    Siteify each health file in order.

    With ``stop_on_failure`` (the default) the first missing file raises
    MissingInputError and nothing after it is written; files written before
    the failure stay on disk. Otherwise missing files are collected in
    ``BatchResult.errors`` and the batch carries on.
    """
    batch = BatchResult()
    for health_file in health_files:
        try:
            result = synthesize(
                health_file.filename,
                health_file.overrides,
                source_dir=config.source_dir,
                output_dir=config.output_dir,
                permalink_prefix=config.permalink_prefix,
            )
        except MissingInputError as e:
            if config.stop_on_failure:
                raise
            log.warning("Skipping %s: %s", health_file.filename, e)
            batch.errors.append(BatchError(filename=health_file.filename, message=str(e)))
            continue
        batch.results.append(result)
    return batch
