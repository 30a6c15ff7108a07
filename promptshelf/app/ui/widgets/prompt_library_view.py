"""Browse, filter and inspect the prompt library."""

from __future__ import annotations

import logging
from typing import List, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPlainTextEdit,
    QPushButton,
    QSplitter,
    QVBoxLayout,
    QWidget,
)

from promptshelf.app.core.placeholders import format_placeholders
from promptshelf.app.core.prompt_library import (
    ALL,
    FAVORITES,
    LIBRARY_VIEWS,
    PROMPT_CATEGORIES,
    PROMPT_TOOLS,
    Page,
    Prompt,
    PromptLibrary,
    paginate,
)
from promptshelf.config.favorites_store import FavoritesStore

LOGGER = logging.getLogger(__name__)

_CATEGORY_NAMES = dict(PROMPT_CATEGORIES)
_TOOL_NAMES = dict(PROMPT_TOOLS)


class PromptLibraryView(QWidget):
    """Category sidebar, search and tool filters, paged results and a detail pane."""

    prompt_selected = Signal(str)
    favorite_toggled = Signal(str, bool)

    def __init__(
        self,
        library: PromptLibrary,
        *,
        favorites: Optional[FavoritesStore] = None,
        page_size: int = 12,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._library = library
        self._favorites = favorites
        self._page_size = page_size
        self._page = paginate([], page_size=page_size)
        self._current: Optional[Prompt] = None

        self._build_ui()
        self.refresh()

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        self._category_list = QListWidget()
        for key, name in PROMPT_CATEGORIES:
            item = QListWidgetItem(name)
            item.setData(Qt.UserRole, key)
            self._category_list.addItem(item)
        self._category_list.setCurrentRow(0)
        self._category_list.currentItemChanged.connect(lambda *_: self._on_filters_changed())

        self._search_edit = QLineEdit()
        self._search_edit.setPlaceholderText("Search prompts...")
        self._search_edit.textChanged.connect(lambda *_: self._on_filters_changed())

        self._tool_combo = QComboBox()
        for key, name in PROMPT_TOOLS:
            self._tool_combo.addItem(name, key)
        self._tool_combo.currentIndexChanged.connect(lambda *_: self._on_filters_changed())

        self._view_combo = QComboBox()
        for key, name in LIBRARY_VIEWS:
            self._view_combo.addItem(name, key)
        self._view_combo.currentIndexChanged.connect(lambda *_: self._on_filters_changed())

        filter_row = QHBoxLayout()
        filter_row.addWidget(self._search_edit, stretch=1)
        filter_row.addWidget(self._tool_combo)
        filter_row.addWidget(self._view_combo)

        self._count_label = QLabel()
        self._count_label.setStyleSheet("color: #666;")
        self._results = QListWidget()
        self._results.currentItemChanged.connect(self._on_current_item_changed)
        self._empty_label = QLabel("No prompts found.")
        self._empty_label.setAlignment(Qt.AlignCenter)
        self._empty_label.setStyleSheet("color: #666;")

        self._prev_btn = QPushButton("Previous")
        self._prev_btn.clicked.connect(self.previous_page)
        self._next_btn = QPushButton("Next")
        self._next_btn.clicked.connect(self.next_page)
        self._page_label = QLabel()
        pager = QHBoxLayout()
        pager.addWidget(self._prev_btn)
        pager.addStretch()
        pager.addWidget(self._page_label)
        pager.addStretch()
        pager.addWidget(self._next_btn)

        results_panel = QWidget()
        results_layout = QVBoxLayout(results_panel)
        results_layout.setContentsMargins(0, 0, 0, 0)
        results_layout.addLayout(filter_row)
        results_layout.addWidget(self._count_label)
        results_layout.addWidget(self._results, stretch=1)
        results_layout.addWidget(self._empty_label)
        results_layout.addLayout(pager)

        self._title_label = QLabel()
        self._title_label.setStyleSheet("font-size: 16px; font-weight: 600;")
        self._title_label.setWordWrap(True)
        self._meta_label = QLabel()
        self._meta_label.setStyleSheet("color: #555;")
        self._description_label = QLabel()
        self._description_label.setWordWrap(True)
        self._tags_label = QLabel()
        self._placeholders_label = QLabel()
        self._placeholders_label.setStyleSheet("color: #666;")
        self._content_view = QPlainTextEdit()
        self._content_view.setReadOnly(True)

        self._copy_btn = QPushButton("Copy")
        self._copy_btn.clicked.connect(self.copy_current_prompt)
        self._favorite_btn = QPushButton("Add to Favorites")
        self._favorite_btn.setEnabled(self._favorites is not None)
        self._favorite_btn.clicked.connect(self.toggle_current_favorite)
        actions = QHBoxLayout()
        actions.addWidget(self._copy_btn)
        actions.addWidget(self._favorite_btn)
        actions.addStretch()

        self._detail_panel = QWidget()
        detail_layout = QVBoxLayout(self._detail_panel)
        detail_layout.setContentsMargins(0, 0, 0, 0)
        detail_layout.addWidget(self._title_label)
        detail_layout.addWidget(self._meta_label)
        detail_layout.addWidget(self._description_label)
        detail_layout.addWidget(self._tags_label)
        detail_layout.addWidget(self._placeholders_label)
        detail_layout.addWidget(self._content_view, stretch=1)
        detail_layout.addLayout(actions)

        splitter = QSplitter(Qt.Horizontal)
        splitter.addWidget(self._category_list)
        splitter.addWidget(results_panel)
        splitter.addWidget(self._detail_panel)
        splitter.setStretchFactor(1, 1)
        splitter.setStretchFactor(2, 2)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.addWidget(splitter)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    @property
    def category(self) -> str:
        item = self._category_list.currentItem()
        return item.data(Qt.UserRole) if item is not None else ALL

    @property
    def tool(self) -> str:
        return self._tool_combo.currentData() or ALL

    @property
    def view(self) -> str:
        return self._view_combo.currentData() or ALL

    @property
    def query(self) -> str:
        return self._search_edit.text()

    def set_category(self, category: str) -> None:
        for row in range(self._category_list.count()):
            if self._category_list.item(row).data(Qt.UserRole) == category:
                self._category_list.setCurrentRow(row)
                return
        raise ValueError(f"Unknown category: {category!r}")

    def set_tool(self, tool: str) -> None:
        self._set_combo(self._tool_combo, tool, "tool")

    def set_view(self, view: str) -> None:
        self._set_combo(self._view_combo, view, "view")

    def set_query(self, query: str) -> None:
        self._search_edit.setText(query)

    def current_page(self) -> Page:
        return self._page

    def visible_prompt_ids(self) -> List[str]:
        return [prompt.id for prompt in self._page.items]

    def next_page(self) -> None:
        if self._page.has_next:
            self._show_page(self._page.page + 1)

    def previous_page(self) -> None:
        if self._page.has_previous:
            self._show_page(self._page.page - 1)

    def current_prompt(self) -> Optional[Prompt]:
        return self._current

    def select_prompt(self, prompt_id: str) -> None:
        for row in range(self._results.count()):
            if self._results.item(row).data(Qt.UserRole) == prompt_id:
                self._results.setCurrentRow(row)
                return
        raise ValueError(f"Prompt {prompt_id!r} is not on the current page")

    def copy_current_prompt(self) -> str:
        """Copy the selected template to the clipboard and return it."""

        if self._current is None:
            return ""
        QGuiApplication.clipboard().setText(self._current.content)
        LOGGER.info("Copied prompt '%s' to clipboard", self._current.id)
        return self._current.content

    def toggle_current_favorite(self) -> bool:
        if self._current is None or self._favorites is None:
            return False
        prompt_id = self._current.id
        is_favorite = self._favorites.toggle(prompt_id)
        self.favorite_toggled.emit(prompt_id, is_favorite)
        if self.view == FAVORITES and not is_favorite:
            self.refresh()
        else:
            self._update_favorite_button()
        return is_favorite

    def refresh(self) -> None:
        """Re-run the filters and return to the first page."""

        self._show_page(1)

    # ------------------------------------------------------------------
    # Internal logic
    # ------------------------------------------------------------------
    def _set_combo(self, combo: QComboBox, key: str, kind: str) -> None:
        index = combo.findData(key)
        if index < 0:
            raise ValueError(f"Unknown {kind}: {key!r}")
        combo.setCurrentIndex(index)

    def _on_filters_changed(self) -> None:
        self.refresh()

    def _browse(self) -> List[Prompt]:
        favorites = self._favorites.ids() if self._favorites is not None else ()
        return self._library.browse(
            view=self.view,
            category=self.category,
            tool=self.tool,
            query=self.query,
            favorites=favorites,
        )

    def _show_page(self, number: int) -> None:
        self._page = paginate(self._browse(), page=number, page_size=self._page_size)

        self._results.blockSignals(True)
        self._results.clear()
        for prompt in self._page.items:
            item = QListWidgetItem(f"{prompt.title}\n{prompt.description}")
            item.setData(Qt.UserRole, prompt.id)
            item.setToolTip(_TOOL_NAMES.get(prompt.tool, prompt.tool))
            self._results.addItem(item)
        if self._page.items:
            self._results.setCurrentRow(0)
        self._results.blockSignals(False)

        has_results = bool(self._page.items)
        self._results.setVisible(has_results)
        self._empty_label.setVisible(not has_results)
        noun = "prompt" if self._page.total == 1 else "prompts"
        self._count_label.setText(f"{self._page.total} {noun}")
        self._page_label.setText(f"Page {self._page.page} of {max(self._page.total_pages, 1)}")
        self._prev_btn.setEnabled(self._page.has_previous)
        self._next_btn.setEnabled(self._page.has_next)

        self._on_current_item_changed(self._results.currentItem() if has_results else None)

    def _on_current_item_changed(self, item: Optional[QListWidgetItem], *_args) -> None:
        prompt = None
        if item is not None:
            prompt = self._library.get(item.data(Qt.UserRole))
        self._current = prompt
        self._detail_panel.setEnabled(prompt is not None)

        if prompt is None:
            for label in (self._title_label, self._meta_label, self._description_label, self._tags_label):
                label.clear()
            self._placeholders_label.clear()
            self._content_view.clear()
            self._update_favorite_button()
            return

        meta = [
            _TOOL_NAMES.get(prompt.tool, prompt.tool),
            _CATEGORY_NAMES.get(prompt.category, prompt.category),
        ]
        if prompt.author_name:
            meta.append(f"by {prompt.author_name}")
        if prompt.created_at is not None:
            meta.append(prompt.created_at.isoformat())
        meta.append(f"{prompt.likes} likes")

        self._title_label.setText(prompt.title)
        self._meta_label.setText(" | ".join(meta))
        self._description_label.setText(prompt.description)
        self._tags_label.setText(", ".join(f"#{tag}" for tag in prompt.tags))
        self._placeholders_label.setText(f"Placeholders: {format_placeholders(prompt.placeholders)}")
        self._content_view.setPlainText(prompt.content)
        self._update_favorite_button()
        self.prompt_selected.emit(prompt.id)

    def _update_favorite_button(self) -> None:
        favorite = (
            self._current is not None
            and self._favorites is not None
            and self._favorites.is_favorite(self._current.id)
        )
        self._favorite_btn.setText("Remove from Favorites" if favorite else "Add to Favorites")


__all__ = ["PromptLibraryView"]
