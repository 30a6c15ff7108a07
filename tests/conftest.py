"""Shared pytest configuration."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Widgets must render without a display server.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(autouse=True)
def _isolate_user_dir(tmp_path, monkeypatch: pytest.MonkeyPatch):
    """Keep tests from writing into the user's real PromptShelf directory."""

    home = tmp_path / "promptshelf-home"
    home.mkdir()
    monkeypatch.setenv("PROMPTSHELF_HOME", str(home))
    for name in (
        "PROMPTSHELF_TRIGGER",
        "PROMPTSHELF_PICKER_MAX_RESULTS",
        "PROMPTSHELF_DEBUG",
        "PROMPTSHELF_PROMPTS_DIR",
        "PROMPTSHELF_LOG_LEVELS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


@pytest.fixture
def registry():
    from promptshelf.app.core.placeholders import PlaceholderRegistry

    with PlaceholderRegistry() as session_registry:
        yield session_registry
