"""Curated placeholder descriptions and the initial session catalog."""

from __future__ import annotations

import re
from typing import Dict, Tuple

from .models import Placeholder

DESCRIPTION_SUFFIX = " to include in the prompt"

# Splits "CustomField" -> ["Custom", "Field"]; all-caps labels stay whole.
_WORD_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

CURATED_DESCRIPTIONS: Dict[str, str] = {
    "TOPIC": "Main subject of the prompt",
    "AUDIENCE": "Target audience",
    "TONE": "Tone of voice (formal, casual, etc)",
    "LENGTH": "Expected output length",
    "FORMAT": "Output format (blog, email, etc)",
    "KEYWORDS": "Important keywords to include",
    "STYLE": "Writing style",
    "GOAL": "Goal of the content",
    "EXAMPLE": "Example to follow",
    "CONTEXT": "Background information",
}


def describe_placeholder(label: str) -> str:
    """Return a human-readable hint for ``label``.

    Well-known labels use the curated table. Anything else is split at
    lower-to-upper case transitions, each word is recapitalised, and the
    words are joined with a fixed suffix.
    """

    curated = CURATED_DESCRIPTIONS.get(label.upper())
    if curated is not None:
        return curated

    segments = [segment for segment in _WORD_BOUNDARY_RE.split(label.strip()) if segment]
    words = " ".join(segment.lower().capitalize() for segment in segments)
    return f"{words}{DESCRIPTION_SUFFIX}"


def _build_initial() -> Tuple[Placeholder, ...]:
    return tuple(
        Placeholder(id=label.lower(), label=label, description=description)
        for label, description in CURATED_DESCRIPTIONS.items()
    )


INITIAL_PLACEHOLDERS: Tuple[Placeholder, ...] = _build_initial()


__all__ = [
    "CURATED_DESCRIPTIONS",
    "DESCRIPTION_SUFFIX",
    "INITIAL_PLACEHOLDERS",
    "describe_placeholder",
]
