"""Placeholder data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Placeholder:
    """A named template variable rendered as ``[LABEL]`` in prompt text."""

    id: str
    label: str
    description: str

    @property
    def token(self) -> str:
        return f"[{self.label}]"

    def matches(self, term: str) -> bool:
        """Return ``True`` when ``term`` occurs in the label or description (case-insensitive)."""

        needle = (term or "").lower()
        return needle in self.label.lower() or needle in self.description.lower()


__all__ = ["Placeholder"]
