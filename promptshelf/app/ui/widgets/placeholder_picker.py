"""Searchable picker dialog for inserting placeholders into a template."""

from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QDialog,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from promptshelf.app.core.placeholders import Placeholder

SearchFn = Callable[[str], List[Placeholder]]


class PlaceholderPickerDialog(QDialog):
    """Filter placeholders by label/description and pick one (or create a new one)."""

    placeholder_chosen = Signal(str)
    create_requested = Signal(str)

    def __init__(
        self,
        search: SearchFn,
        *,
        max_results: Optional[int] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Insert Placeholder")
        self.setWindowFlag(Qt.FramelessWindowHint, True)
        self.resize(420, 320)

        self._search = search
        self._max_results = max_results

        self._search_edit = QLineEdit()
        self._search_edit.setPlaceholderText("Search placeholders...")
        self._search_edit.textChanged.connect(self._refresh_results)
        self._search_edit.returnPressed.connect(self._on_return_pressed)

        self._results = QListWidget()
        self._results.itemActivated.connect(self._on_item_activated)

        self._empty_label = QLabel("No placeholders found.")
        self._empty_label.setAlignment(Qt.AlignCenter)
        self._empty_label.setStyleSheet("color: #666;")

        self._create_btn = QPushButton("")
        self._create_btn.clicked.connect(self._on_create_clicked)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(6)
        layout.addWidget(self._search_edit)
        layout.addWidget(self._results, stretch=1)
        layout.addWidget(self._empty_label)
        layout.addWidget(self._create_btn)

        self._refresh_results("")

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def search_text(self) -> str:
        return self._search_edit.text()

    def set_search_text(self, text: str) -> None:
        self._search_edit.setText(text)

    def visible_labels(self) -> List[str]:
        return [self._results.item(row).data(Qt.UserRole) for row in range(self._results.count())]

    def reset(self) -> None:
        """Clear the search term before the dialog is shown again."""

        self._search_edit.blockSignals(True)
        self._search_edit.clear()
        self._search_edit.blockSignals(False)
        self._refresh_results("")
        self._search_edit.setFocus()

    def choose(self, label: str) -> None:
        self.placeholder_chosen.emit(label)
        self.accept()

    def request_create(self, term: str) -> None:
        term = term.strip()
        if not term:
            return
        self.create_requested.emit(term)
        self.accept()

    # ------------------------------------------------------------------
    # Internal logic
    # ------------------------------------------------------------------
    def _refresh_results(self, term: str) -> None:
        placeholders = self._search(term)
        if self._max_results is not None:
            placeholders = placeholders[: self._max_results]

        self._results.clear()
        for placeholder in placeholders:
            item = QListWidgetItem(f"{placeholder.label}\n{placeholder.description}")
            item.setData(Qt.UserRole, placeholder.label)
            item.setToolTip(placeholder.description)
            self._results.addItem(item)

        has_results = bool(placeholders)
        self._results.setVisible(has_results)
        self._empty_label.setVisible(not has_results)
        stripped = term.strip()
        self._create_btn.setVisible(not has_results and bool(stripped))
        self._create_btn.setText(f'Create "{stripped.upper()}"')
        if has_results:
            self._results.setCurrentRow(0)

    def _on_item_activated(self, item: QListWidgetItem) -> None:
        self.choose(item.data(Qt.UserRole))

    def _on_return_pressed(self) -> None:
        item = self._results.currentItem()
        if item is not None and self._results.count():
            self.choose(item.data(Qt.UserRole))
        else:
            self.request_create(self.search_text)

    def _on_create_clicked(self) -> None:
        self.request_create(self.search_text)


__all__ = ["PlaceholderPickerDialog"]
