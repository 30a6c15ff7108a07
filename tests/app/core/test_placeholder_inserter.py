from __future__ import annotations

import pytest

from promptshelf.app.core.placeholders import (
    InserterState,
    PlaceholderInserter,
    PlaceholderInsertionError,
    PlaceholderRegistry,
)


def _open_picker(inserter: PlaceholderInserter, text: str) -> None:
    assert inserter.on_text_changed(text, len(text)) is True
    assert inserter.state is InserterState.PICKER_OPEN


def test_typing_trigger_opens_picker(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    assert inserter.on_text_changed("Write about ", 12) is False
    assert inserter.state is InserterState.IDLE
    _open_picker(inserter, "Write about /")
    assert inserter.trigger_offset == 13


def test_trigger_does_not_reopen_open_picker(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    _open_picker(inserter, "a/")
    assert inserter.on_text_changed("a//", 3) is False
    assert inserter.trigger_offset == 2


def test_select_replaces_trigger_with_token(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    _open_picker(inserter, "Write about /")

    result = inserter.select("TOPIC")

    assert result.text == "Write about [TOPIC]"
    assert result.caret == 12 + len("TOPIC") + 2
    assert result.caret == len(result.text)
    assert inserter.state is InserterState.IDLE
    assert inserter.trigger_offset is None


def test_select_in_middle_of_text_keeps_suffix(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    assert inserter.on_text_changed("Tone: / please", 7) is True

    result = inserter.select("tone")

    assert result.text == "Tone: [TONE] please"
    assert result.caret == 12
    assert result.text[result.caret :] == " please"


def test_search_filters_registry_while_open(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    _open_picker(inserter, "/")
    assert [p.label for p in inserter.search("key")] == ["KEYWORDS"]
    assert len(inserter.search("")) == len(registry)


def test_create_registers_and_inserts(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    _open_picker(inserter, "Sell /")

    result = inserter.create("productName")

    assert result.text == "Sell [PRODUCTNAME]"
    assert result.placeholder.description == "Product Name to include in the prompt"
    assert registry.get_placeholder_by_label("PRODUCTNAME") is result.placeholder


def test_create_existing_term_reuses_entry(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    size = len(registry)
    _open_picker(inserter, "/")
    result = inserter.create("goal")
    assert result.text == "[GOAL]"
    assert len(registry) == size


def test_dismiss_leaves_text_untouched(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    _open_picker(inserter, "Path a/")
    inserter.dismiss()
    assert inserter.state is InserterState.IDLE
    assert inserter.text == "Path a/"


def test_select_without_open_picker_raises(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    inserter.on_text_changed("No trigger here", 15)
    with pytest.raises(PlaceholderInsertionError):
        inserter.select("TOPIC")
    with pytest.raises(PlaceholderInsertionError):
        inserter.search("")
    assert inserter.text == "No trigger here"


def test_select_unknown_label_keeps_picker_open(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    _open_picker(inserter, "/")
    with pytest.raises(PlaceholderInsertionError):
        inserter.select("NOPE")
    assert inserter.is_picker_open


def test_caret_is_clamped(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry)
    assert inserter.on_text_changed("abc/", 99) is True
    assert inserter.trigger_offset == 4
    inserter.dismiss()
    assert inserter.on_text_changed("/abc", -5) is False
    assert inserter.caret == 0


def test_custom_trigger(registry: PlaceholderRegistry) -> None:
    inserter = PlaceholderInserter(registry, trigger="@")
    assert inserter.on_text_changed("a/", 2) is False
    assert inserter.on_text_changed("a@", 2) is True
    assert inserter.select("STYLE").text == "a[STYLE]"


def test_trigger_must_be_single_character(registry: PlaceholderRegistry) -> None:
    with pytest.raises(ValueError):
        PlaceholderInserter(registry, trigger="//")
