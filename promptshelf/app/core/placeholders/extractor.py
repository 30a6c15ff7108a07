"""Bracket placeholder extraction utilities."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

# Escaped or nested brackets are not supported.
PLACEHOLDER_PATTERN = re.compile(r"\[([^\]]+)\]")

NO_PLACEHOLDERS_MESSAGE = "No placeholders found"


def extract_placeholders(content: Optional[str]) -> List[str]:
    """Return the distinct placeholder names referenced in ``content``.

    Names are compared case-sensitively and returned in order of first
    occurrence.
    """

    return list(dict.fromkeys(match.group(1) for match in PLACEHOLDER_PATTERN.finditer(content or "")))


def format_placeholders(placeholders: Optional[Iterable[str]]) -> str:
    """Return a readable, comma-separated list of placeholder names."""

    names = list(placeholders or [])
    if not names:
        return NO_PLACEHOLDERS_MESSAGE
    return ", ".join(names)


__all__ = [
    "NO_PLACEHOLDERS_MESSAGE",
    "PLACEHOLDER_PATTERN",
    "extract_placeholders",
    "format_placeholders",
]
