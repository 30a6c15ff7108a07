#!/usr/bin/env python3
"""Main window hosting the prompt library and the submit form."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import QApplication, QMainWindow, QTabWidget

from promptshelf.app.core.prompt_library import PromptLibrary, load_prompt_library
from promptshelf.app.resources import prompts_dir
from promptshelf.app.ui.widgets import PromptLibraryView, SubmitPromptForm
from promptshelf.config.favorites_store import FavoritesStore
from promptshelf.config.settings import EditorSettings
from promptshelf.logging_config import setup_logging

LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Library and submit tabs sharing one set of editor settings."""

    def __init__(
        self,
        settings: Optional[EditorSettings] = None,
        *,
        library: Optional[PromptLibrary] = None,
        favorites: Optional[FavoritesStore] = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle("PromptShelf")
        self.resize(1100, 720)

        self._settings = settings or EditorSettings()
        if library is None:
            library = load_prompt_library(self._settings.prompts_dir or prompts_dir())
        self._library = library

        self._library_view = PromptLibraryView(library, favorites=favorites or FavoritesStore())
        self._submit_form = SubmitPromptForm(self._settings)
        self._submit_form.submitted.connect(self._on_submitted)

        self._tabs = QTabWidget()
        self._tabs.addTab(self._library_view, "Library")
        self._tabs.addTab(self._submit_form, "Submit a Prompt")
        self.setCentralWidget(self._tabs)

    @property
    def library(self) -> PromptLibrary:
        return self._library

    @property
    def library_view(self) -> PromptLibraryView:
        return self._library_view

    @property
    def submit_form(self) -> SubmitPromptForm:
        return self._submit_form

    def show_submit_form(self) -> None:
        self._tabs.setCurrentWidget(self._submit_form)

    def showEvent(self, event) -> None:  # noqa: N802 - Qt override
        self._submit_form.start_session()
        super().showEvent(event)

    def closeEvent(self, event) -> None:  # noqa: N802 - Qt override
        self._submit_form.shutdown()
        super().closeEvent(event)

    def _on_submitted(self, path: Path) -> None:
        LOGGER.info("Prompt submitted: %s", path)


def main() -> int:
    settings = EditorSettings.from_env()
    setup_logging(settings)
    LOGGER.debug("Editor settings: %s", settings.as_dict())
    app = QApplication.instance() or QApplication(sys.argv)
    window = MainWindow(settings)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
