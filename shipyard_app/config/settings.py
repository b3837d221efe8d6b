"""
Basic settings and logging configuration for the shipyard registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class Settings:
    """Application-level settings."""

    project_root: Path
    data_dir: Path
    db_path: Path

    @classmethod
    def default(cls) -> "Settings":
        """Create default settings based on the current file location."""
        project_root = Path(__file__).resolve().parents[2]
        data_dir = project_root / "shipyard_app_data"
        data_dir.mkdir(exist_ok=True)
        db_path = data_dir / "shipyard.db"
        return cls(project_root=project_root, data_dir=data_dir, db_path=db_path)


def init_logging(settings: Settings, level: int = logging.INFO) -> None:
    """Configure basic logging to console and a log file in the data dir."""
    log_file = settings.data_dir / "shipyard.log"

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info("Logging initialized. DB at %s", settings.db_path)
