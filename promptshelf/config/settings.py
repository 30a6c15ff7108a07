"""Editor settings resolved from the environment and an optional ``.env`` file."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple

from dotenv import load_dotenv

LOGGER = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on", "enabled"}
_FALSE_VALUES = {"0", "false", "no", "off", "disabled"}


def _parse_bool(value: Any, default: bool = False) -> bool:
    """Return a boolean coerced from ``value`` with sensible defaults."""
    if isinstance(value, bool):
        return value
    if value is None:
        return default
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    if text:
        LOGGER.warning("Ignoring unrecognised boolean value %r", value)
    return default


def _parse_positive_int(value: Any, default: int) -> int:
    if value is None or str(value).strip() == "":
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        LOGGER.warning("Ignoring non-integer value %r", value)
        return default
    if parsed < 1:
        LOGGER.warning("Ignoring non-positive value %r", value)
        return default
    return parsed


def _parse_trigger(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value)
    if len(text) != 1:
        LOGGER.warning("Trigger must be a single character, got %r; using %r", value, default)
        return default
    return text


def _parse_log_levels(value: Any) -> Tuple[Tuple[str, str], ...]:
    """Parse ``logger=LEVEL`` pairs separated by commas."""
    if value is None:
        return ()
    levels = []
    for chunk in str(value).split(","):
        chunk = chunk.strip()
        if not chunk:
            continue
        name, sep, level = chunk.partition("=")
        name, level = name.strip(), level.strip().upper()
        if not sep or not name or not isinstance(logging.getLevelName(level), int):
            LOGGER.warning("Ignoring invalid log level entry %r", chunk)
            continue
        levels.append((name, level))
    return tuple(levels)


@dataclass(frozen=True)
class EditorSettings:
    """Settings for the template editor and prompt library."""

    trigger_character: str = "/"
    picker_max_results: int = 50
    debug: bool = False
    prompts_dir: Optional[Path] = None
    log_levels: Tuple[Tuple[str, str], ...] = ()

    ENV_MAPPING: ClassVar[Mapping[str, str]] = {
        "trigger_character": "PROMPTSHELF_TRIGGER",
        "picker_max_results": "PROMPTSHELF_PICKER_MAX_RESULTS",
        "debug": "PROMPTSHELF_DEBUG",
        "prompts_dir": "PROMPTSHELF_PROMPTS_DIR",
        "log_levels": "PROMPTSHELF_LOG_LEVELS",
    }

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        *,
        env_file: Optional[Path] = None,
    ) -> "EditorSettings":
        """Build settings from ``environ`` (defaults to ``os.environ`` after loading ``.env``)."""

        if environ is None:
            load_dotenv(env_file)
            environ = os.environ

        defaults = cls()
        values = {
            name: environ.get(env_name)
            for name, env_name in cls.ENV_MAPPING.items()
        }
        prompts_dir = values["prompts_dir"]

        return cls(
            trigger_character=_parse_trigger(values["trigger_character"], defaults.trigger_character),
            picker_max_results=_parse_positive_int(values["picker_max_results"], defaults.picker_max_results),
            debug=_parse_bool(values["debug"], defaults.debug),
            prompts_dir=Path(prompts_dir).expanduser() if prompts_dir else None,
            log_levels=_parse_log_levels(values["log_levels"]),
        )

    def as_dict(self) -> Dict[str, Any]:
        return {field.name: getattr(self, field.name) for field in fields(self) if field.init}


__all__ = ["EditorSettings"]
