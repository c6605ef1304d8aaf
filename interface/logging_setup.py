"""Loguru sink configuration for the command line and API entry points."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from config import LOGGING_CONFIG, LOGS_DIR


def setup_logging(level: Optional[str] = None) -> None:
    """Replace loguru's default sink with the configured ones and enable library logs."""
    level = (level or LOGGING_CONFIG["level"]).upper()

    logger.remove()
    logger.add(sys.stderr, level=level, format=LOGGING_CONFIG["format"])

    if LOGGING_CONFIG["file"]:
        log_path = Path(LOGGING_CONFIG["file"])
        if not log_path.is_absolute():
            log_path = LOGS_DIR / log_path
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            level=level,
            format=LOGGING_CONFIG["format"],
            rotation=LOGGING_CONFIG["rotation"],
            retention=LOGGING_CONFIG["retention"],
        )

    logger.enable("hand_ranking")
