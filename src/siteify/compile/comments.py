"""Remove HTML comments from markdown before it is published."""

from __future__ import annotations

import re

_COMMENT = r"<!--(?:(?!-->).)*-->"

# A comment that is the only thing on its line(s) takes the line break with it.
_WHOLE_LINE_COMMENT_RE = re.compile(r"^[ \t]*" + _COMMENT + r"[ \t]*(?:\r?\n|\Z)", re.M | re.S)
_INLINE_COMMENT_RE = re.compile(_COMMENT, re.S)


def strip_comments(text: str) -> str:
    """Return *text* with every ``<!-- ... -->`` comment removed.

    ``/* */`` and ``//`` sequences are ordinary text in markdown and are kept.
    """
    text = _WHOLE_LINE_COMMENT_RE.sub("", text)
    return _INLINE_COMMENT_RE.sub("", text)
