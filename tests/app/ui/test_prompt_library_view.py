from __future__ import annotations

from pathlib import Path

import pytest
from PySide6.QtWidgets import QApplication

from promptshelf.app.core.prompt_library import Prompt, PromptLibrary, load_prompt_library
from promptshelf.app.resources import prompts_dir
from promptshelf.app.ui.widgets import PromptLibraryView
from promptshelf.config.favorites_store import FavoritesStore


@pytest.fixture
def favorites(tmp_path: Path) -> FavoritesStore:
    return FavoritesStore(tmp_path / "favorites.json")


@pytest.fixture
def view(qtbot, favorites: FavoritesStore) -> PromptLibraryView:
    widget = PromptLibraryView(load_prompt_library(prompts_dir()), favorites=favorites)
    qtbot.addWidget(widget)
    return widget


def test_initial_page_lists_every_prompt(view: PromptLibraryView) -> None:
    assert len(view.visible_prompt_ids()) == 8
    assert view.current_prompt().id == view.visible_prompt_ids()[0]


def test_category_tool_and_query_filters(view: PromptLibraryView) -> None:
    view.set_category("design")
    assert view.visible_prompt_ids() == ["character-portrait", "fantasy-landscape"]

    view.set_tool("midjourney")
    view.set_query("landscape")
    assert view.visible_prompt_ids() == ["fantasy-landscape"]

    view.set_query("no such prompt anywhere")
    assert view.visible_prompt_ids() == []
    assert view.current_prompt() is None


def test_featured_and_trending_views(view: PromptLibraryView) -> None:
    library = load_prompt_library(prompts_dir())

    view.set_view("featured")
    assert view.visible_prompt_ids() == [p.id for p in library.featured()]

    view.set_view("trending")
    assert view.visible_prompt_ids() == [p.id for p in library.trending()]


def test_selecting_prompt_shows_detail_and_copies(qtbot, view: PromptLibraryView) -> None:
    with qtbot.waitSignal(view.prompt_selected) as blocker:
        view.select_prompt("weekly-planner")

    prompt = view.current_prompt()
    assert blocker.args == ["weekly-planner"]
    assert prompt.id == "weekly-planner"
    assert view.copy_current_prompt() == prompt.content
    assert QApplication.clipboard().text() == prompt.content


def test_favorites_view_tracks_toggles(view: PromptLibraryView, favorites: FavoritesStore) -> None:
    view.select_prompt("business-pitch")
    assert view.toggle_current_favorite() is True
    assert favorites.ids() == ["business-pitch"]

    view.set_view("favorites")
    assert view.visible_prompt_ids() == ["business-pitch"]

    assert view.toggle_current_favorite() is False
    assert view.visible_prompt_ids() == []


def test_pagination_moves_between_pages(qtbot) -> None:
    prompts = [
        Prompt(
            id=f"prompt-{index}",
            title=f"Prompt {index}",
            description="Paged prompt",
            content="Write about [TOPIC].",
            tool="chatgpt",
            category="writing",
        )
        for index in range(5)
    ]
    widget = PromptLibraryView(PromptLibrary(prompts), page_size=2)
    qtbot.addWidget(widget)

    assert widget.visible_prompt_ids() == ["prompt-0", "prompt-1"]
    widget.next_page()
    widget.next_page()
    assert widget.current_page().page == 3
    assert widget.visible_prompt_ids() == ["prompt-4"]
    widget.next_page()
    assert widget.current_page().page == 3

    widget.previous_page()
    assert widget.visible_prompt_ids() == ["prompt-2", "prompt-3"]

    widget.set_query("paged")
    assert widget.current_page().page == 1
