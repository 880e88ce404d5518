"""Siteify a health file: add site frontmatter and copy it into the docs collection."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from siteify.compile.comments import strip_comments
from siteify.compile.frontmatter import (
    build_front_matter_dict,
    extract_title,
    front_matter_text,
    slugify,
)
from siteify.core.exceptions import MissingInputError
from siteify.core.schema import WriteResult

log = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("collections/_docs")


def read_health_file(path: Path, filename: str) -> str:
    """Return the contents of a health file, raising MissingInputError if it is absent."""
    if not path.is_file():
        raise MissingInputError(filename)
    return path.read_text(encoding="utf-8")


def render_health_file(
    text: str,
    filename: str,
    overrides: dict[str, Any] | None = None,
    *,
    permalink_prefix: str = "/docs/",
) -> tuple[str, str, dict[str, Any]]:
    """Return ``(slug, document, frontmatter)`` for the raw text of a health file."""
    title, body = extract_title(strip_comments(text), filename)
    slug = slugify(filename)
    fm = build_front_matter_dict(
        title=title,
        slug=slug,
        filename=filename,
        permalink_prefix=permalink_prefix,
        overrides=overrides,
    )
    return slug, front_matter_text(fm) + body, fm


def synthesize(
    filename: str,
    overrides: dict[str, Any] | None = None,
    *,
    source_dir: Path | None = None,
    output_dir: Path | None = None,
    permalink_prefix: str = "/docs/",
) -> WriteResult:
    """
    Add site metadata to a health file's frontmatter and write it to the collection dir.

    The destination ``<output_dir>/<slug>.md`` is always overwritten. YAML errors
    from unserializable overrides are not caught here.
    """
    if not filename:
        raise ValueError("filename must not be empty")
    source = Path(source_dir or Path.cwd()) / filename
    output_dir = Path(output_dir) if output_dir else Path.cwd() / DEFAULT_OUTPUT_DIR

    text = read_health_file(source, filename)
    slug, document, fm = render_health_file(text, filename, overrides, permalink_prefix=permalink_prefix)

    destination = output_dir / f"{slug}.md"
    payload = document.encode("utf-8")
    changed = not (destination.is_file() and destination.read_bytes() == payload)
    output_dir.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(payload)
    log.info("Siteified %s -> %s%s", filename, destination, "" if changed else " (unchanged)")

    return WriteResult(
        source=source,
        destination=destination,
        slug=slug,
        frontmatter=fm,
        changed=changed,
    )
