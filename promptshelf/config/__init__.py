"""Configuration helpers: user paths, editor settings and favorites."""

from .favorites_store import FavoritesStore
from .paths import (
    app_config_dir,
    app_logs_dir,
    app_submissions_dir,
    app_user_root,
)
from .settings import EditorSettings

__all__ = [
    "EditorSettings",
    "FavoritesStore",
    "app_config_dir",
    "app_logs_dir",
    "app_submissions_dir",
    "app_user_root",
]
