"""Prompt library records, filtering and pagination."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple

import frontmatter
import yaml

from promptshelf.app.core.placeholders import extract_placeholders

LOGGER = logging.getLogger(__name__)

ALL = "all"

PROMPT_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    (ALL, "All Prompts"),
    ("marketing", "Marketing"),
    ("writing", "Writing"),
    ("design", "Design"),
    ("coding", "Coding"),
    ("productivity", "Productivity"),
    ("business", "Business"),
)

PROMPT_TOOLS: Tuple[Tuple[str, str], ...] = (
    (ALL, "All Tools"),
    ("chatgpt", "ChatGPT"),
    ("midjourney", "Midjourney"),
    ("claude", "Claude"),
    ("dall-e", "DALL-E"),
    ("other", "Other Tools"),
)


FEATURED = "featured"
TRENDING = "trending"
FAVORITES = "favorites"

LIBRARY_VIEWS: Tuple[Tuple[str, str], ...] = (
    (ALL, "All"),
    (FEATURED, "Featured"),
    (TRENDING, "Trending"),
    (FAVORITES, "Favorites"),
)


class PromptNotFoundError(KeyError):
    """Raised when a prompt id is not present in the library."""


def category_ids() -> Tuple[str, ...]:
    return tuple(key for key, _ in PROMPT_CATEGORIES if key != ALL)


def tool_ids() -> Tuple[str, ...]:
    return tuple(key for key, _ in PROMPT_TOOLS if key != ALL)


@dataclass(slots=True)
class Prompt:
    """A shareable prompt template."""

    id: str
    title: str
    description: str
    content: str
    tool: str
    category: str
    tags: List[str] = field(default_factory=list)
    author_name: str = ""
    created_at: Optional[date] = None
    likes: int = 0
    featured: bool = False
    trending: bool = False

    @property
    def placeholders(self) -> List[str]:
        return extract_placeholders(self.content)

    def matches_query(self, query: str) -> bool:
        needle = query.strip().lower()
        if not needle:
            return True
        return (
            needle in self.title.lower()
            or needle in self.description.lower()
            or any(needle in tag.lower() for tag in self.tags)
        )

    @classmethod
    def from_metadata(cls, prompt_id: str, metadata: Mapping[str, object], content: str) -> "Prompt":
        tags = metadata.get("tags") or []
        if isinstance(tags, str):
            tags = [tag.strip() for tag in tags.split(",") if tag.strip()]
        return cls(
            id=str(metadata.get("id") or prompt_id),
            title=str(metadata.get("title", "")),
            description=str(metadata.get("description", "")),
            content=content,
            tool=str(metadata.get("tool", "other")),
            category=str(metadata.get("category", "")),
            tags=[str(tag) for tag in tags],
            author_name=str(metadata.get("author_name", "")),
            created_at=_coerce_date(metadata.get("created_at")),
            likes=int(metadata.get("likes", 0) or 0),
            featured=bool(metadata.get("featured", False)),
            trending=bool(metadata.get("trending", False)),
        )


@dataclass(frozen=True, slots=True)
class Page:
    """One page of a paginated listing."""

    items: Tuple[Prompt, ...]
    page: int
    page_size: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1


def paginate(items: Sequence[Prompt], page: int = 1, page_size: int = 12) -> Page:
    """Return the 1-based ``page`` of ``items``."""

    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    start = (page - 1) * page_size
    return Page(items=tuple(items[start : start + page_size]), page=page, page_size=page_size, total=len(items))


class PromptLibrary:
    """In-memory collection of prompts with the library page filters."""

    def __init__(self, prompts: Iterable[Prompt] = ()) -> None:
        self._prompts: List[Prompt] = list(prompts)

    def __len__(self) -> int:
        return len(self._prompts)

    def __iter__(self):
        return iter(self._prompts)

    def all(self) -> List[Prompt]:
        return list(self._prompts)

    def get(self, prompt_id: str) -> Prompt:
        for prompt in self._prompts:
            if prompt.id == prompt_id:
                return prompt
        raise PromptNotFoundError(prompt_id)

    def by_category(self, category: str) -> List[Prompt]:
        if category == ALL:
            return self.all()
        return [prompt for prompt in self._prompts if prompt.category == category]

    def by_tool(self, tool: str) -> List[Prompt]:
        if tool == ALL:
            return self.all()
        return [prompt for prompt in self._prompts if prompt.tool == tool]

    def featured(self) -> List[Prompt]:
        return [prompt for prompt in self._prompts if prompt.featured]

    def trending(self) -> List[Prompt]:
        trending = [prompt for prompt in self._prompts if prompt.trending]
        return sorted(trending, key=lambda prompt: prompt.likes, reverse=True)

    def filter(self, *, category: str = ALL, tool: str = ALL, query: str = "") -> List[Prompt]:
        """Apply the category, tool and free-text filters in turn."""

        results = self.all()
        if category != ALL:
            results = [prompt for prompt in results if prompt.category == category]
        if tool != ALL:
            results = [prompt for prompt in results if prompt.tool == tool]
        if query and query.strip():
            results = [prompt for prompt in results if prompt.matches_query(query)]
        return results

    def browse(
        self,
        *,
        view: str = ALL,
        category: str = ALL,
        tool: str = ALL,
        query: str = "",
        favorites: Iterable[str] = (),
    ) -> List[Prompt]:
        """Filter the library, then narrow it to one of ``LIBRARY_VIEWS``.

        Featured and favorite views keep library order; the trending view is
        ordered by likes.
        """

        results = self.filter(category=category, tool=tool, query=query)
        if view == ALL:
            return results
        if view == FEATURED:
            source = self.featured()
        elif view == TRENDING:
            source = self.trending()
        elif view == FAVORITES:
            wanted = set(favorites)
            source = [prompt for prompt in results if prompt.id in wanted]
        else:
            raise ValueError(f"Unknown library view: {view!r}")
        allowed = {prompt.id for prompt in results}
        return [prompt for prompt in source if prompt.id in allowed]


def load_prompt_library(directory: Path) -> PromptLibrary:
    """Load every ``*.md`` prompt (front matter + body) under ``directory``."""

    directory = Path(directory)
    prompts: List[Prompt] = []
    if not directory.exists():
        LOGGER.warning("Prompt directory not found: %s", directory)
        return PromptLibrary(prompts)

    for path in sorted(directory.glob("*.md")):
        try:
            document = frontmatter.load(str(path))
            prompt = Prompt.from_metadata(path.stem, document.metadata, document.content.strip())
        except (OSError, ValueError, TypeError, yaml.YAMLError) as exc:
            LOGGER.warning("Skipping prompt file %s: %s", path, exc)
            continue
        if not prompt.title or not prompt.content:
            LOGGER.warning("Skipping prompt file %s: missing title or content", path)
            continue
        prompts.append(prompt)

    LOGGER.debug("Loaded %d prompts from %s", len(prompts), directory)
    return PromptLibrary(prompts)


def _coerce_date(value: object) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value))


__all__ = [
    "ALL",
    "FAVORITES",
    "FEATURED",
    "LIBRARY_VIEWS",
    "PROMPT_CATEGORIES",
    "PROMPT_TOOLS",
    "Page",
    "Prompt",
    "PromptLibrary",
    "PromptNotFoundError",
    "TRENDING",
    "category_ids",
    "load_prompt_library",
    "paginate",
    "tool_ids",
]
