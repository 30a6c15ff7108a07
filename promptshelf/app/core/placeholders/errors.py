"""Exceptions raised by the placeholder template engine."""

from __future__ import annotations


class PlaceholderError(Exception):
    """Base class for placeholder engine failures."""


class InvalidPlaceholderLabelError(PlaceholderError, ValueError):
    """Raised when a placeholder label is blank."""

    def __init__(self, label: str) -> None:
        super().__init__(f"Invalid placeholder label {label!r}: labels must not be blank.")
        self.label = label


class RegistryClosedError(PlaceholderError, RuntimeError):
    """Raised when a closed placeholder registry is used."""


class PlaceholderInsertionError(PlaceholderError, RuntimeError):
    """Raised when a placeholder cannot be spliced into the template."""


__all__ = [
    "InvalidPlaceholderLabelError",
    "PlaceholderError",
    "PlaceholderInsertionError",
    "RegistryClosedError",
]
