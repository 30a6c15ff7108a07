"""
Centralized logging configuration for PromptShelf.
Provides consistent logging setup with file rotation and per-module levels
taken from the editor settings.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Dict, Iterable, Optional, Tuple

from promptshelf.config.paths import app_logs_dir
from promptshelf.config.settings import EditorSettings

QUIET_LIBRARIES = ("dotenv",)


def module_levels(debug: bool, overrides: Iterable[Tuple[str, str]] = ()) -> Dict[str, int]:
    """Return the logger level table for the application's modules."""
    verbose = logging.DEBUG if debug else logging.INFO
    levels = {
        "promptshelf.app.core.placeholders": verbose,
        "promptshelf.app.core.prompt_library": logging.INFO,
        "promptshelf.app.core.submission": logging.INFO,
        "promptshelf.app.ui": verbose,
        "promptshelf.config": verbose,
    }
    levels.update({name: logging.WARNING for name in QUIET_LIBRARIES})
    for name, level in overrides:
        levels[name] = logging.getLevelName(level)
    return levels


class ApplicationLogger:
    """Root handlers plus the module level table for one application run."""

    def __init__(self, settings: Optional[EditorSettings] = None, log_dir: Optional[Path] = None):
        self.settings = settings or EditorSettings()
        self.log_dir = log_dir or app_logs_dir()
        self.log_dir.mkdir(parents=True, exist_ok=True)

    @property
    def log_file(self) -> Path:
        return self.log_dir / "promptshelf.log"

    def setup(self) -> None:
        debug = self.settings.debug
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()

        file_handler = logging.handlers.RotatingFileHandler(
            self.log_file,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
        console_handler.setFormatter(logging.Formatter("%(asctime)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"))

        root_logger.addHandler(file_handler)
        root_logger.addHandler(console_handler)

        for name, level in module_levels(debug, self.settings.log_levels).items():
            logging.getLogger(name).setLevel(level)

        root_logger.info("Logging initialized - Debug: %s, Log dir: %s", debug, self.log_dir)


def setup_logging(settings: Optional[EditorSettings] = None, log_dir: Optional[Path] = None) -> ApplicationLogger:
    """Configure logging from ``settings`` and return the ``ApplicationLogger``."""
    app_logger = ApplicationLogger(settings, log_dir=log_dir)
    app_logger.setup()
    return app_logger
