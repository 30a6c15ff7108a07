from __future__ import annotations

from PySide6.QtGui import QTextCursor

from promptshelf.app.core.placeholders import InserterState, PlaceholderRegistry
from promptshelf.app.ui.widgets import PromptTemplateEdit
from promptshelf.app.ui.widgets.template_editor import code_point_index, utf16_position
from promptshelf.config.settings import EditorSettings


def _editor_with_text(qtbot, registry: PlaceholderRegistry, text: str, **kwargs) -> PromptTemplateEdit:
    editor = PromptTemplateEdit(registry, **kwargs)
    qtbot.addWidget(editor)
    editor.setPlainText(text)
    editor.moveCursor(QTextCursor.End)
    return editor


def test_typing_trigger_opens_picker(qtbot, registry: PlaceholderRegistry) -> None:
    editor = _editor_with_text(qtbot, registry, "Write about ")
    assert editor.picker_dialog is None

    editor.insertPlainText("/")

    assert editor.inserter.state is InserterState.PICKER_OPEN
    assert editor.picker_dialog is not None
    assert "TOPIC" in editor.picker_dialog.visible_labels()


def test_choosing_placeholder_replaces_trigger(qtbot, registry: PlaceholderRegistry) -> None:
    editor = _editor_with_text(qtbot, registry, "Write about ")
    editor.insertPlainText("/")

    with qtbot.waitSignal(editor.placeholder_inserted) as blocker:
        editor.picker_dialog.choose("TOPIC")

    assert blocker.args == ["TOPIC"]
    assert editor.template() == "Write about [TOPIC]"
    assert editor.textCursor().position() == 19
    assert editor.placeholders() == ["TOPIC"]
    assert editor.inserter.state is InserterState.IDLE


def test_picker_search_and_create(qtbot, registry: PlaceholderRegistry) -> None:
    editor = _editor_with_text(qtbot, registry, "Sell ")
    editor.insertPlainText("/")
    picker = editor.picker_dialog

    picker.set_search_text("aud")
    assert picker.visible_labels() == ["AUDIENCE"]

    picker.set_search_text("BrandVoice")
    assert picker.visible_labels() == []

    picker.request_create(picker.search_text)

    assert editor.template() == "Sell [BRANDVOICE]"
    assert registry.get_placeholder_by_label("brandvoice") is not None


def test_dismissing_picker_keeps_text(qtbot, registry: PlaceholderRegistry) -> None:
    editor = _editor_with_text(qtbot, registry, "a ")
    editor.insertPlainText("/")

    editor.picker_dialog.reject()

    assert editor.inserter.state is InserterState.IDLE
    assert editor.template() == "a /"


def test_placeholders_changed_signal(qtbot, registry: PlaceholderRegistry) -> None:
    editor = PromptTemplateEdit(registry)
    qtbot.addWidget(editor)

    received: list[list[str]] = []
    editor.placeholders_changed.connect(received.append)

    editor.setPlainText("Hi [NAME] from [PLACE]")

    assert received
    assert received[-1] == ["NAME", "PLACE"]


def test_picker_respects_max_results(qtbot, registry: PlaceholderRegistry) -> None:
    settings = EditorSettings(picker_max_results=3, trigger_character="@")
    editor = _editor_with_text(qtbot, registry, "x ", settings=settings)

    editor.insertPlainText("/")
    assert editor.picker_dialog is None

    editor.insertPlainText("@")
    assert editor.picker_dialog.visible_labels() == ["TOPIC", "AUDIENCE", "TONE"]


def test_insertion_after_emoji_replaces_trigger(qtbot, registry: PlaceholderRegistry) -> None:
    editor = _editor_with_text(qtbot, registry, "Smile \U0001F600 about ")
    editor.insertPlainText("/")
    assert editor.inserter.state is InserterState.PICKER_OPEN

    editor.picker_dialog.choose("TOPIC")

    assert editor.template() == "Smile \U0001F600 about [TOPIC]"
    # The emoji occupies two UTF-16 code units in the Qt document.
    assert editor.textCursor().position() == len(editor.template()) + 1
    assert editor.inserter.caret == len(editor.template())


def test_trigger_after_emoji_mid_text_opens_picker(qtbot, registry: PlaceholderRegistry) -> None:
    editor = _editor_with_text(qtbot, registry, "\U0001F600 x tail")
    cursor = editor.textCursor()
    cursor.setPosition(4)
    editor.setTextCursor(cursor)

    editor.insertPlainText("/")

    assert editor.inserter.state is InserterState.PICKER_OPEN
    assert editor.inserter.trigger_offset == 4

    editor.picker_dialog.choose("TONE")

    assert editor.template() == "\U0001F600 x[TONE] tail"
    assert editor.textCursor().position() == 10


def test_qt_offsets_convert_to_code_points() -> None:
    text = "a\U0001F600b"
    assert code_point_index(text, 0) == 0
    assert code_point_index(text, 3) == 2
    assert code_point_index(text, 4) == 3
    assert utf16_position(text, 2) == 3
    assert utf16_position(text, 3) == 4
