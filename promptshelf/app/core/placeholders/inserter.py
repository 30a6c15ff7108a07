"""Caret-aware placeholder insertion for template editors.

The inserter is a two-state machine driven by editor events. Typing the
trigger character opens the picker; choosing a placeholder replaces the
trigger character with the ``[LABEL]`` token and returns the new caret.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional

from .errors import PlaceholderInsertionError
from .models import Placeholder
from .registry import PlaceholderRegistry

LOGGER = logging.getLogger(__name__)

DEFAULT_TRIGGER = "/"


class InserterState(enum.Enum):
    IDLE = "idle"
    PICKER_OPEN = "picker_open"


@dataclass(frozen=True, slots=True)
class InsertionResult:
    """Template text and caret offset after a placeholder was inserted."""

    text: str
    caret: int
    placeholder: Placeholder


class PlaceholderInserter:
    """Drive the ``/`` placeholder picker for a single text surface."""

    def __init__(self, registry: PlaceholderRegistry, *, trigger: str = DEFAULT_TRIGGER) -> None:
        if len(trigger) != 1:
            raise ValueError(f"Trigger must be a single character, got {trigger!r}")
        self._registry = registry
        self._trigger = trigger
        self._state = InserterState.IDLE
        self._text = ""
        self._caret = 0
        self._trigger_offset: Optional[int] = None

    @property
    def registry(self) -> PlaceholderRegistry:
        return self._registry

    @property
    def trigger(self) -> str:
        return self._trigger

    @property
    def state(self) -> InserterState:
        return self._state

    @property
    def is_picker_open(self) -> bool:
        return self._state is InserterState.PICKER_OPEN

    @property
    def text(self) -> str:
        return self._text

    @property
    def caret(self) -> int:
        return self._caret

    @property
    def trigger_offset(self) -> Optional[int]:
        return self._trigger_offset

    def on_text_changed(self, text: str, caret: int) -> bool:
        """Record an edit; return ``True`` when it opened the picker."""

        self._text = text or ""
        self._caret = min(max(caret, 0), len(self._text))

        if self.is_picker_open:
            return False
        if self._caret > 0 and self._text[self._caret - 1] == self._trigger:
            self._state = InserterState.PICKER_OPEN
            self._trigger_offset = self._caret
            LOGGER.debug("Placeholder picker opened at offset %d", self._caret)
            return True
        return False

    def search(self, term: str = "", *, limit: Optional[int] = None) -> List[Placeholder]:
        """Return registry entries matching ``term`` for the open picker."""

        self._require_open("search")
        return self._registry.search(term, limit=limit)

    def select(self, label: str) -> InsertionResult:
        """Replace the trigger character with ``[label]``."""

        self._require_open("select")
        placeholder = self._registry.get_placeholder_by_label(label)
        if placeholder is None:
            raise PlaceholderInsertionError(f"Unknown placeholder '{label}'.")
        return self._splice(placeholder)

    def create(self, term: str) -> InsertionResult:
        """Register ``term`` as a placeholder and insert it."""

        self._require_open("create")
        placeholder = self._registry.add_placeholder(term)
        return self._splice(placeholder)

    def dismiss(self) -> None:
        """Close the picker without touching the template."""

        if self.is_picker_open:
            LOGGER.debug("Placeholder picker dismissed")
        self._state = InserterState.IDLE
        self._trigger_offset = None

    def _splice(self, placeholder: Placeholder) -> InsertionResult:
        offset = self._trigger_offset
        if offset is None or offset < 1:
            self.dismiss()
            raise PlaceholderInsertionError("No trigger offset recorded for this insertion.")

        token = placeholder.token
        text = self._text[: offset - 1] + token + self._text[offset:]
        caret = offset - 1 + len(placeholder.label) + 2

        self._text = text
        self._caret = caret
        self._state = InserterState.IDLE
        self._trigger_offset = None
        LOGGER.debug("Inserted %s at offset %d", token, offset - 1)
        return InsertionResult(text=text, caret=caret, placeholder=placeholder)

    def _require_open(self, action: str) -> None:
        if not self.is_picker_open:
            raise PlaceholderInsertionError(f"Cannot {action} placeholder: picker is not open.")


__all__ = ["DEFAULT_TRIGGER", "InserterState", "InsertionResult", "PlaceholderInserter"]
