"""Small helpers shared across modules."""

from __future__ import annotations

import re

_UNSAFE_CHARS = re.compile(r"[\x00-\x2C\x2E-\x2F\x3A-\x40\x5B-\x60\x7B-\x7F]+")


def sanitize_for_file_path(name: str) -> str:
    """Replace runs of characters that are unsafe in file names with a dash.

    The extension (text after the last dot) is sanitized separately so that
    ``"Report: Q1.pdf"`` becomes ``"Report-Q1.pdf"`` rather than ``"Report-Q1-pdf"``.
    """
    stem, dot, extension = name.rpartition(".")
    if not dot:
        return _UNSAFE_CHARS.sub("-", name)
    return f"{_UNSAFE_CHARS.sub('-', stem)}.{_UNSAFE_CHARS.sub('-', extension)}"
