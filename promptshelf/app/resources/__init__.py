"""Resource helpers for bundled application data."""

from __future__ import annotations

from importlib import resources
from pathlib import Path


def prompts_dir() -> Path:
    """Return the filesystem path to the bundled sample prompts."""
    return Path(resources.files(__name__).joinpath("prompts"))


__all__ = ["prompts_dir"]
