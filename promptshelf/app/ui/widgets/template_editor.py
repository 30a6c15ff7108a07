"""Prompt template editor with ``/``-triggered placeholder insertion."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from promptshelf.app.core.placeholders import (
    InsertionResult,
    PlaceholderInserter,
    PlaceholderRegistry,
    extract_placeholders,
)
from promptshelf.config.settings import EditorSettings

from .placeholder_picker import PlaceholderPickerDialog

LOGGER = logging.getLogger(__name__)


def _utf16_length(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def code_point_index(text: str, position: int) -> int:
    """Convert a Qt cursor position (UTF-16 code units) into an index into ``text``."""

    units = text.encode("utf-16-le")[: max(position, 0) * 2]
    return len(units.decode("utf-16-le", errors="ignore"))


def utf16_position(text: str, index: int) -> int:
    """Convert an index into ``text`` into a Qt cursor position."""

    return _utf16_length(text[: max(index, 0)])


class PromptTemplateEdit(QPlainTextEdit):
    """Plain-text template editor that opens a placeholder picker on the trigger character.

    The registry is owned by the caller (one per editing session) and shared
    with the picker; the editor never closes it. Qt reports cursor positions
    in UTF-16 code units while the inserter indexes Python strings, so every
    offset crossing that boundary is converted.
    """

    placeholders_changed = Signal(list)
    placeholder_inserted = Signal(str)

    def __init__(
        self,
        registry: PlaceholderRegistry,
        *,
        settings: Optional[EditorSettings] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._settings = settings or EditorSettings()
        self._inserter = PlaceholderInserter(registry, trigger=self._settings.trigger_character)
        self._picker: Optional[PlaceholderPickerDialog] = None
        self._applying = False

        self.setPlaceholderText(
            "Paste your full prompt template here. Use [PLACEHOLDERS] for customizable parts. "
            f"Type {self._settings.trigger_character} to insert a placeholder."
        )
        self.textChanged.connect(self._on_text_changed)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def inserter(self) -> PlaceholderInserter:
        return self._inserter

    @property
    def picker_dialog(self) -> Optional[PlaceholderPickerDialog]:
        return self._picker

    def set_registry(self, registry: PlaceholderRegistry) -> None:
        """Start a new editing session backed by ``registry``."""

        if self._picker is not None:
            self._picker.reject()
            self._picker.deleteLater()
            self._picker = None
        self._inserter = PlaceholderInserter(registry, trigger=self._settings.trigger_character)
        self._inserter.on_text_changed(self.toPlainText(), self._caret_index())

    def template(self) -> str:
        return self.toPlainText()

    def placeholders(self) -> list[str]:
        return extract_placeholders(self.toPlainText())

    def insert_placeholder(self, label: str) -> InsertionResult:
        """Insert an existing placeholder in place of the trigger character."""

        before = self.toPlainText()
        start = self._trigger_start()
        result = self._inserter.select(label)
        self._apply(result, before, start)
        return result

    def create_placeholder(self, term: str) -> InsertionResult:
        """Register ``term`` as a new placeholder and insert it."""

        before = self.toPlainText()
        start = self._trigger_start()
        result = self._inserter.create(term)
        self._apply(result, before, start)
        return result

    # ------------------------------------------------------------------
    # Internal logic
    # ------------------------------------------------------------------
    def _caret_index(self) -> int:
        return code_point_index(self.toPlainText(), self.textCursor().position())

    def _on_text_changed(self) -> None:
        if self._applying:
            return
        opened = self._inserter.on_text_changed(self.toPlainText(), self._caret_index())
        self.placeholders_changed.emit(self.placeholders())
        if opened:
            self._open_picker()

    def _open_picker(self) -> None:
        if self._picker is None:
            self._picker = PlaceholderPickerDialog(
                self._inserter.search,
                max_results=self._settings.picker_max_results,
                parent=self,
            )
            self._picker.placeholder_chosen.connect(self.insert_placeholder)
            self._picker.create_requested.connect(self.create_placeholder)
            self._picker.rejected.connect(self._on_picker_rejected)

        self._picker.reset()
        anchor = self.viewport().mapToGlobal(self.cursorRect().bottomLeft())
        self._picker.move(anchor)
        self._picker.open()

    def _on_picker_rejected(self) -> None:
        self._inserter.dismiss()

    def _trigger_start(self) -> Optional[int]:
        offset = self._inserter.trigger_offset
        return None if offset is None else offset - 1

    def _apply(self, result: InsertionResult, before: str, start: int) -> None:
        qt_start = utf16_position(before, start)
        qt_caret = utf16_position(result.text, result.caret)

        self._applying = True
        try:
            cursor = self.textCursor()
            cursor.beginEditBlock()
            cursor.setPosition(qt_start)
            cursor.setPosition(qt_start + _utf16_length(self._inserter.trigger), QTextCursor.KeepAnchor)
            cursor.insertText(result.placeholder.token)
            cursor.endEditBlock()

            if self.toPlainText() != result.text:
                LOGGER.warning("Editor text diverged from inserter state; replacing with inserted text")
                self.setPlainText(result.text)
                cursor = self.textCursor()

            cursor.setPosition(qt_caret)
            self.setTextCursor(cursor)
        finally:
            self._applying = False

        self.setFocus()
        self.placeholders_changed.emit(self.placeholders())
        self.placeholder_inserted.emit(result.placeholder.label)


__all__ = ["PromptTemplateEdit", "code_point_index", "utf16_position"]
