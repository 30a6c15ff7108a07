"""
App paths and cross-platform user directories for PromptShelf.

User-visible files live in a Documents folder (``~/Documents/promptshelf`` and
platform equivalents). ``PROMPTSHELF_HOME`` overrides the root, which tests
use to keep writes inside a temporary directory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional


APP_FOLDER_NAME = "promptshelf"
HOME_ENV_VAR = "PROMPTSHELF_HOME"


def _xdg_documents_dir() -> Optional[Path]:
    """Best-effort attempt to read Linux XDG documents directory."""
    config = Path.home() / ".config" / "user-dirs.dirs"
    try:
        if not config.exists():
            return None
        text = config.read_text(encoding="utf-8", errors="ignore")
    except OSError:
        return None
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("XDG_DOCUMENTS_DIR"):
            parts = line.split("=", 1)
            if len(parts) != 2:
                continue
            value = parts[1].strip().strip('"')
            # Replace $HOME token
            if value.startswith("$HOME/"):
                value = str(Path.home() / value.split("/", 1)[1])
            return Path(value).expanduser()
    return None


def documents_dir() -> Path:
    """Return a user-visible Documents directory across platforms."""
    home = Path.home()
    if sys.platform.startswith("win"):
        candidates = [home / "Documents", home / "My Documents"]
    elif sys.platform == "darwin":
        candidates = [home / "Documents"]
    else:
        xdg = _xdg_documents_dir()
        candidates = [xdg] if xdg else [home / "Documents"]

    for c in candidates:
        if c and c.exists():
            return c
    # Fallback to home if Documents isn't present
    return home


def app_user_root() -> Path:
    override = os.getenv(HOME_ENV_VAR)
    root = Path(override).expanduser() if override else documents_dir() / APP_FOLDER_NAME
    root.mkdir(parents=True, exist_ok=True)
    return root


def app_config_dir() -> Path:
    p = app_user_root() / "config"
    p.mkdir(parents=True, exist_ok=True)
    return p


def app_logs_dir() -> Path:
    p = app_user_root() / "logs"
    p.mkdir(parents=True, exist_ok=True)
    return p


def app_submissions_dir() -> Path:
    """Moderation queue for submitted prompts."""
    p = app_user_root() / "submissions" / "pending"
    p.mkdir(parents=True, exist_ok=True)
    return p


__all__ = [
    "APP_FOLDER_NAME",
    "HOME_ENV_VAR",
    "documents_dir",
    "app_user_root",
    "app_config_dir",
    "app_logs_dir",
    "app_submissions_dir",
]
