"""Session-scoped registry of known placeholders."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional

from .catalog import INITIAL_PLACEHOLDERS, describe_placeholder
from .errors import InvalidPlaceholderLabelError, RegistryClosedError
from .models import Placeholder

LOGGER = logging.getLogger(__name__)


class PlaceholderRegistry:
    """Catalog of placeholders owned by a single editing session.

    The registry is seeded with the initial placeholders on construction and
    grows as the user creates new ones. It is never persisted; ``close()``
    (or leaving a ``with`` block) ends its lifetime.
    """

    def __init__(self, initial: Optional[Iterable[Placeholder]] = None) -> None:
        self._initial: tuple[Placeholder, ...] = tuple(INITIAL_PLACEHOLDERS if initial is None else initial)
        self._entries: List[Placeholder] = list(self._initial)
        self._closed = False

    # ------------------------------------------------------------------
    # Lifetime
    # ------------------------------------------------------------------
    def __enter__(self) -> "PlaceholderRegistry":
        self._ensure_open()
        return self

    def __exit__(self, *_exc_info: object) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Discard all entries and end the session."""

        if self._closed:
            return
        LOGGER.debug("Closing placeholder registry with %d entries", len(self._entries))
        self._entries.clear()
        self._closed = True

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def add_placeholder(self, label: str) -> Placeholder:
        """Register ``label`` or return the existing entry with the same label."""

        self._ensure_open()
        cleaned = (label or "").strip()
        if not cleaned:
            raise InvalidPlaceholderLabelError(label)

        existing = self._find(cleaned)
        if existing is not None:
            return existing

        label = cleaned.upper()
        placeholder = Placeholder(
            id=label.lower(),
            label=label,
            description=describe_placeholder(cleaned),
        )
        self._entries.append(placeholder)
        LOGGER.debug("Registered placeholder %s", placeholder.token)
        return placeholder

    def remove_placeholder(self, placeholder_id: str) -> None:
        self._ensure_open()
        before = len(self._entries)
        self._entries = [entry for entry in self._entries if entry.id != placeholder_id]
        if len(self._entries) != before:
            LOGGER.debug("Removed placeholder '%s'", placeholder_id)

    def get_placeholder_by_label(self, label: str) -> Optional[Placeholder]:
        self._ensure_open()
        return self._find((label or "").strip())

    def reset_placeholders(self) -> None:
        """Restore the registry to the initial placeholder set."""

        self._ensure_open()
        self._entries = list(self._initial)
        LOGGER.debug("Placeholder registry reset to %d initial entries", len(self._entries))

    def search(self, term: str = "", *, limit: Optional[int] = None) -> List[Placeholder]:
        """Return entries whose label or description contains ``term``."""

        self._ensure_open()
        if term:
            results = [entry for entry in self._entries if entry.matches(term)]
        else:
            results = list(self._entries)
        if limit is not None:
            results = results[: max(limit, 0)]
        return results

    def placeholders(self) -> List[Placeholder]:
        self._ensure_open()
        return list(self._entries)

    def labels(self) -> List[str]:
        return [entry.label for entry in self.placeholders()]

    def __len__(self) -> int:
        self._ensure_open()
        return len(self._entries)

    def __iter__(self) -> Iterator[Placeholder]:
        return iter(self.placeholders())

    def __contains__(self, label: object) -> bool:
        if not isinstance(label, str):
            return False
        return self.get_placeholder_by_label(label) is not None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _find(self, label: str) -> Optional[Placeholder]:
        key = label.casefold()
        for entry in self._entries:
            if entry.label.casefold() == key:
                return entry
        return None

    def _ensure_open(self) -> None:
        if self._closed:
            raise RegistryClosedError("Placeholder registry has been closed.")


__all__ = ["PlaceholderRegistry"]
