"""Configuration settings for the hand ranking project."""

import os
from pathlib import Path
from typing import Dict, Any

# Project paths
PROJECT_ROOT = Path(__file__).parent
LOGS_DIR = Path(os.getenv("LOGS_DIR", PROJECT_ROOT / "logs"))

# Logging Configuration
LOGGING_CONFIG = {
    "level": os.getenv("LOG_LEVEL", "INFO"),
    "format": "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}",
    "rotation": "1 day",
    "retention": "30 days",
    "file": os.getenv("LOG_FILE"),  # relative names land in LOGS_DIR
}

# API Configuration
API_CONFIG = {
    "host": os.getenv("API_HOST", "0.0.0.0"),
    "port": int(os.getenv("API_PORT", "8000")),
    "debug": os.getenv("DEBUG", "False").lower() == "true",
}


def get_config() -> Dict[str, Any]:
    """Get complete configuration dictionary."""
    return {
        "logging": LOGGING_CONFIG,
        "api": API_CONFIG,
        "paths": {
            "project_root": PROJECT_ROOT,
            "logs_dir": LOGS_DIR,
        }
    }
