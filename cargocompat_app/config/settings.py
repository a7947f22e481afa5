"""
Basic settings and logging configuration for the cargo compatibility tool.
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
    report_dir: Path

    @classmethod
    def default(cls) -> "Settings":
        """Create default settings based on the current file location."""
        project_root = Path(__file__).resolve().parents[2]
        data_dir = project_root / "cargocompat_app_data"
        data_dir.mkdir(exist_ok=True)
        report_dir = data_dir / "reports"
        report_dir.mkdir(exist_ok=True)
        return cls(project_root=project_root, data_dir=data_dir, report_dir=report_dir)


def init_logging(settings: Settings, level: int = logging.INFO) -> None:
    """Configure basic logging to console and a log file in the data directory."""
    log_file = settings.data_dir / "cargocompat.log"

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )

    logging.getLogger(__name__).info("Logging initialized. Reports in %s", settings.report_dir)
