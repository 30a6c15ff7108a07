"""
Favorite prompts stored as a small JSON document in the user config folder.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from .paths import app_config_dir

LOGGER = logging.getLogger(__name__)

FAVORITES_FILENAME = "favorites.json"


class FavoritesStore:
    """Ordered set of favorite prompt ids persisted on every change."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self.path = Path(path) if path is not None else app_config_dir() / FAVORITES_FILENAME
        self._ids: List[str] = self._load()

    def ids(self) -> List[str]:
        return list(self._ids)

    def is_favorite(self, prompt_id: str) -> bool:
        return prompt_id in self._ids

    def add(self, prompt_id: str) -> None:
        if prompt_id in self._ids:
            return
        self._ids.append(prompt_id)
        self._save()

    def remove(self, prompt_id: str) -> None:
        if prompt_id not in self._ids:
            return
        self._ids.remove(prompt_id)
        self._save()

    def toggle(self, prompt_id: str) -> bool:
        """Flip the favorite flag for ``prompt_id`` and return the new state."""

        if self.is_favorite(prompt_id):
            self.remove(prompt_id)
            return False
        self.add(prompt_id)
        return True

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def _load(self) -> List[str]:
        if not self.path.exists():
            return []
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            LOGGER.warning("Ignoring unreadable favorites file %s: %s", self.path, exc)
            return []
        ids = payload.get("favorites") if isinstance(payload, dict) else None
        if not isinstance(ids, list):
            LOGGER.warning("Ignoring malformed favorites file %s", self.path)
            return []
        return list(dict.fromkeys(str(item) for item in ids))

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"favorites": self._ids}
        self.path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
        LOGGER.debug("Saved %d favorites to %s", len(self._ids), self.path)


__all__ = ["FAVORITES_FILENAME", "FavoritesStore"]
