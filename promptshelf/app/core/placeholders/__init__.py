"""Placeholder template engine: extraction, session registry and insertion."""

from .catalog import CURATED_DESCRIPTIONS, INITIAL_PLACEHOLDERS, describe_placeholder
from .errors import (
    InvalidPlaceholderLabelError,
    PlaceholderError,
    PlaceholderInsertionError,
    RegistryClosedError,
)
from .extractor import PLACEHOLDER_PATTERN, extract_placeholders, format_placeholders
from .inserter import InserterState, InsertionResult, PlaceholderInserter
from .models import Placeholder
from .registry import PlaceholderRegistry

__all__ = [
    "CURATED_DESCRIPTIONS",
    "INITIAL_PLACEHOLDERS",
    "PLACEHOLDER_PATTERN",
    "InserterState",
    "InsertionResult",
    "InvalidPlaceholderLabelError",
    "Placeholder",
    "PlaceholderError",
    "PlaceholderInserter",
    "PlaceholderInsertionError",
    "PlaceholderRegistry",
    "RegistryClosedError",
    "describe_placeholder",
    "extract_placeholders",
    "format_placeholders",
]
