from __future__ import annotations

import logging
from pathlib import Path

import pytest

from promptshelf.config.paths import app_submissions_dir, app_user_root
from promptshelf.config.settings import EditorSettings
from promptshelf.logging_config import module_levels, setup_logging


def test_defaults_without_environment() -> None:
    settings = EditorSettings.from_env({})
    assert settings == EditorSettings()
    assert settings.trigger_character == "/"
    assert settings.picker_max_results == 50
    assert settings.debug is False
    assert settings.prompts_dir is None


def test_environment_overrides(tmp_path: Path) -> None:
    settings = EditorSettings.from_env(
        {
            "PROMPTSHELF_TRIGGER": "@",
            "PROMPTSHELF_PICKER_MAX_RESULTS": "5",
            "PROMPTSHELF_DEBUG": "yes",
            "PROMPTSHELF_PROMPTS_DIR": str(tmp_path),
        }
    )
    assert settings.trigger_character == "@"
    assert settings.picker_max_results == 5
    assert settings.debug is True
    assert settings.prompts_dir == tmp_path


def test_log_levels_parse_logger_pairs(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        settings = EditorSettings.from_env(
            {"PROMPTSHELF_LOG_LEVELS": "promptshelf.app.ui=warning, dotenv=ERROR, broken, x=LOUD"}
        )
    assert settings.log_levels == (("promptshelf.app.ui", "WARNING"), ("dotenv", "ERROR"))
    assert len(caplog.records) == 2
    assert settings.as_dict()["log_levels"] == settings.log_levels


def test_module_levels_follow_debug_and_overrides() -> None:
    assert module_levels(False)["promptshelf.app.core.placeholders"] == logging.INFO
    assert module_levels(True)["promptshelf.app.core.placeholders"] == logging.DEBUG
    assert module_levels(False)["dotenv"] == logging.WARNING

    levels = module_levels(True, (("promptshelf.app.ui", "ERROR"), ("frontmatter", "WARNING")))
    assert levels["promptshelf.app.ui"] == logging.ERROR
    assert levels["frontmatter"] == logging.WARNING


def test_invalid_values_fall_back_to_defaults(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        settings = EditorSettings.from_env(
            {
                "PROMPTSHELF_TRIGGER": "//",
                "PROMPTSHELF_PICKER_MAX_RESULTS": "-3",
                "PROMPTSHELF_DEBUG": "maybe",
            }
        )
    assert settings == EditorSettings()
    assert len(caplog.records) == 3


def test_from_env_reads_dotenv_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / ".env"
    env_file.write_text("PROMPTSHELF_PICKER_MAX_RESULTS=7\n", encoding="utf-8")
    monkeypatch.delenv("PROMPTSHELF_PICKER_MAX_RESULTS", raising=False)

    settings = EditorSettings.from_env(env_file=env_file)

    assert settings.picker_max_results == 7


def test_user_root_honours_override(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PROMPTSHELF_HOME", str(tmp_path / "custom"))
    assert app_user_root() == tmp_path / "custom"
    assert app_submissions_dir() == tmp_path / "custom" / "submissions" / "pending"
    assert app_submissions_dir().is_dir()


def test_setup_logging_writes_rotating_log(tmp_path: Path) -> None:
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    try:
        app_logger = setup_logging(EditorSettings(debug=True), log_dir=tmp_path)
        logging.getLogger("promptshelf.test").debug("hello log")
        for handler in root.handlers:
            handler.flush()
        assert "hello log" in app_logger.log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
