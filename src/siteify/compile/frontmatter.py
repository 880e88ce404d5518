"""Frontmatter helpers: titles, slugs and the YAML preamble for site documents."""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Any

import yaml

_HEADING_RE = re.compile(r"^## (.*)$", re.M)
_HEADING_BLOCK_RE = re.compile(r"^## (.*)\n\n", re.M)


def find_heading(text: str) -> str | None:
    """Return the text of the first level-2 heading in *text*, or None."""
    match = _HEADING_RE.search(text)
    return match.group(1) if match else None


def remove_headings(text: str) -> str:
    """Drop level-2 heading lines that are followed by a blank line.

    Every such heading is removed in one pass, not just the first one.
    """
    return _HEADING_BLOCK_RE.sub("", text)


def title_from_filename(filename: str) -> str:
    """``CODE_OF_CONDUCT.md`` -> ``Code Of Conduct``."""
    tokens = PurePath(filename).stem.lower().split("_")
    return " ".join(token[:1].upper() + token[1:] for token in tokens)


def slugify(filename: str) -> str:
    """``CODE_OF_CONDUCT.md`` -> ``code-of-conduct``."""
    return PurePath(filename).stem.lower().replace("_", "-")


def extract_title(text: str, filename: str) -> tuple[str, str]:
    """Return ``(title, body)``.

    The title comes from the first level-2 heading when there is one (and the
    heading is removed from the body); otherwise it is derived from *filename*
    and the body is returned untouched.
    """
    heading = find_heading(text)
    if heading is None:
        return title_from_filename(filename), text
    return heading, remove_headings(text)


def build_front_matter_dict(
    *,
    title: str,
    slug: str,
    filename: str,
    permalink_prefix: str = "/docs/",
    overrides: dict[str, Any] | None = None,
) -> dict[str, Any]:
    fm: dict[str, Any] = {
        "title": title,
        "permalink": f"{permalink_prefix}{slug}/",
        "note": f"This file is autogenerated. Edit {filename} instead.",
    }
    fm.update(overrides or {})
    return fm


def front_matter_text(fm_dict: dict[str, Any]) -> str:
    """Serialize *fm_dict* as a ``---`` delimited YAML block followed by a blank line."""
    yaml_txt = yaml.safe_dump(
        fm_dict, allow_unicode=True, sort_keys=False, default_flow_style=False, width=1000
    )
    return f"---\n{yaml_txt}---\n\n"
