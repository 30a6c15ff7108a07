"""Prompt submission validation and the moderation queue."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence

import frontmatter

from promptshelf.app.core.placeholders import extract_placeholders
from promptshelf.app.core.prompt_library import PROMPT_CATEGORIES, PROMPT_TOOLS, category_ids, tool_ids

LOGGER = logging.getLogger(__name__)

_SLUG_STRIP_RE = re.compile(r"[^a-z0-9]+")

MIN_LENGTHS = {
    "title": (5, "Title must be at least 5 characters"),
    "description": (10, "Description must be at least 10 characters"),
    "content": (20, "Prompt content must be at least 20 characters"),
    "author_name": (2, "Name must be at least 2 characters"),
}


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str


class SubmissionValidationError(ValueError):
    """Raised when a submission fails validation."""

    def __init__(self, errors: Sequence[FieldError]) -> None:
        self.errors = tuple(errors)
        details = "; ".join(f"{error.field}: {error.message}" for error in self.errors)
        super().__init__(f"Prompt submission is invalid ({details})")


@dataclass(slots=True)
class PromptSubmission:
    """Values entered on the submit form."""

    title: str
    description: str
    content: str
    tool: str = "chatgpt"
    category: str = "writing"
    author_name: str = ""
    tags: str = ""


def parse_tags(raw: Optional[str]) -> List[str]:
    """Split a comma-separated tag string, dropping blanks and case-insensitive duplicates."""

    tags: List[str] = []
    seen: set[str] = set()
    for part in (raw or "").split(","):
        tag = part.strip()
        if not tag or tag.lower() in seen:
            continue
        seen.add(tag.lower())
        tags.append(tag)
    return tags


def validate_submission(submission: PromptSubmission) -> List[FieldError]:
    errors: List[FieldError] = []
    for field_name, (minimum, message) in MIN_LENGTHS.items():
        value = (getattr(submission, field_name) or "").strip()
        if len(value) < minimum:
            errors.append(FieldError(field_name, message))

    if submission.tool not in tool_ids():
        choices = ", ".join(name for key, name in PROMPT_TOOLS if key in tool_ids())
        errors.append(FieldError("tool", f"Tool must be one of: {choices}"))
    if submission.category not in category_ids():
        choices = ", ".join(name for key, name in PROMPT_CATEGORIES if key in category_ids())
        errors.append(FieldError("category", f"Category must be one of: {choices}"))
    return errors


def slugify(text: str) -> str:
    slug = _SLUG_STRIP_RE.sub("-", text.lower()).strip("-")
    return slug or "prompt"


def submit_prompt(
    submission: PromptSubmission,
    queue_dir: Path,
    *,
    now: Optional[datetime] = None,
) -> Path:
    """Validate ``submission`` and write it to the moderation queue.

    Returns the path of the Markdown file that was written. The file carries
    the submission metadata as YAML front matter and the template as body.
    """

    errors = validate_submission(submission)
    if errors:
        raise SubmissionValidationError(errors)

    queue_dir = Path(queue_dir)
    queue_dir.mkdir(parents=True, exist_ok=True)
    submitted_at = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)

    base_slug = slugify(submission.title)
    slug = base_slug
    counter = 2
    while (queue_dir / f"{slug}.md").exists():
        slug = f"{base_slug}-{counter}"
        counter += 1

    content = submission.content.strip()
    document = frontmatter.Post(
        content,
        id=slug,
        title=submission.title.strip(),
        description=submission.description.strip(),
        tool=submission.tool,
        category=submission.category,
        tags=parse_tags(submission.tags),
        author_name=submission.author_name.strip(),
        placeholders=extract_placeholders(content),
        status="pending",
        submitted_at=submitted_at.isoformat(),
    )
    path = queue_dir / f"{slug}.md"
    path.write_text(frontmatter.dumps(document) + "\n", encoding="utf-8")
    LOGGER.info("Queued prompt submission '%s' for review at %s", slug, path)
    return path


__all__ = [
    "FieldError",
    "PromptSubmission",
    "SubmissionValidationError",
    "parse_tags",
    "slugify",
    "submit_prompt",
    "validate_submission",
]
