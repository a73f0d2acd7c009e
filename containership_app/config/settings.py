"""
Basic settings and logging configuration for the container ship app.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

LOG_LEVEL_ENV = "CONTAINERSHIP_LOG_LEVEL"


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    log_path: Path | None
    log_level: str = "INFO"

    @classmethod
    def default(cls) -> "Settings":
        """Create default settings based on the current file location."""
        project_root = Path(__file__).resolve().parents[2]
        data_dir = project_root / "containership_app_data"
        log_level = os.environ.get(LOG_LEVEL_ENV, "INFO").upper()
        return cls(
            project_root=project_root,
            data_dir=data_dir,
            log_path=data_dir / "containership.log",
            log_level=log_level,
        )


def init_logging(settings: Settings) -> None:
    """Configure basic logging to console and optional file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_path is not None:
        settings.log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(settings.log_path, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=handlers,
    )

    logging.getLogger(__name__).info("Logging initialized. Log file at %s", settings.log_path)
