"""Submit form: prompt metadata plus the placeholder-aware template editor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QComboBox,
    QFormLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from promptshelf.app.core.placeholders import PlaceholderRegistry, format_placeholders
from promptshelf.app.core.prompt_library import ALL, PROMPT_CATEGORIES, PROMPT_TOOLS
from promptshelf.app.core.submission import PromptSubmission, SubmissionValidationError, submit_prompt
from promptshelf.config.paths import app_submissions_dir
from promptshelf.config.settings import EditorSettings

from .template_editor import PromptTemplateEdit

LOGGER = logging.getLogger(__name__)


class SubmitPromptForm(QWidget):
    """Collects a prompt submission and writes it to the moderation queue.

    The form owns one placeholder registry per editing session. ``shutdown``
    ends the session and ``start_session`` opens a fresh one when the form is
    shown again.
    """

    submitted = Signal(Path)

    def __init__(self, settings: Optional[EditorSettings] = None, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._registry = PlaceholderRegistry()

        self._title_edit = QLineEdit()
        self._title_edit.setPlaceholderText("E.g., Blog Outline Generator")
        self._description_edit = QLineEdit()
        self._description_edit.setPlaceholderText("Briefly describe what this prompt does")
        self._tool_combo = self._build_combo(PROMPT_TOOLS)
        self._category_combo = self._build_combo(PROMPT_CATEGORIES)
        self._category_combo.setCurrentIndex(self._category_combo.findData("writing"))
        self._author_edit = QLineEdit()
        self._tags_edit = QLineEdit()
        self._tags_edit.setPlaceholderText("Comma-separated, e.g. blogging, SEO")

        self._editor = PromptTemplateEdit(self._registry, settings=settings)
        self._placeholder_label = QLabel(format_placeholders([]))
        self._placeholder_label.setStyleSheet("color: #666;")
        self._editor.placeholders_changed.connect(
            lambda names: self._placeholder_label.setText(format_placeholders(names))
        )

        submit_btn = QPushButton("Submit for Review")
        submit_btn.clicked.connect(self._submit)

        form = QFormLayout()
        form.addRow("Prompt Title", self._title_edit)
        form.addRow("Short Description", self._description_edit)
        form.addRow("AI Tool", self._tool_combo)
        form.addRow("Category", self._category_combo)
        form.addRow("Your Name", self._author_edit)
        form.addRow("Tags", self._tags_edit)

        layout = QVBoxLayout(self)
        layout.addLayout(form)
        layout.addWidget(QLabel("Prompt Template"))
        layout.addWidget(self._editor, stretch=1)
        layout.addWidget(self._placeholder_label)
        layout.addWidget(submit_btn)

    @property
    def editor(self) -> PromptTemplateEdit:
        return self._editor

    @property
    def registry(self) -> PlaceholderRegistry:
        return self._registry

    @property
    def placeholder_summary(self) -> str:
        return self._placeholder_label.text()

    def submission(self) -> PromptSubmission:
        return PromptSubmission(
            title=self._title_edit.text(),
            description=self._description_edit.text(),
            content=self._editor.template(),
            tool=self._tool_combo.currentData(),
            category=self._category_combo.currentData(),
            author_name=self._author_edit.text(),
            tags=self._tags_edit.text(),
        )

    def start_session(self) -> None:
        """Open a new placeholder registry if the previous one was closed."""

        if not self._registry.closed:
            return
        self._registry = PlaceholderRegistry()
        self._editor.set_registry(self._registry)
        LOGGER.debug("Started a new placeholder session")

    def shutdown(self) -> None:
        self._registry.close()

    def _build_combo(self, choices) -> QComboBox:
        combo = QComboBox()
        for key, name in choices:
            if key == ALL:
                continue
            combo.addItem(name, key)
        return combo

    def _submit(self) -> None:
        try:
            path = submit_prompt(self.submission(), app_submissions_dir())
        except SubmissionValidationError as exc:
            messages = "\n".join(error.message for error in exc.errors)
            QMessageBox.warning(self, "Check Your Prompt", messages)
            return
        self.submitted.emit(path)
        QMessageBox.information(self, "Prompt Submitted", "Your prompt has been submitted for review!")


__all__ = ["SubmitPromptForm"]
