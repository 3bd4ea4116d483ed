"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no environment at all.  Tests and embedding code
may also construct ``Settings`` explicitly and pass it to
``create_app``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Items API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, log records only go to
    # the console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Bind address used by ``run.py``.
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))

    # Load the three sample items into the store when the application
    # is built.
    seed_sample_items: bool = _env_flag("SEED_SAMPLE_ITEMS", "true")

    # When true, listing an empty collection answers 404 instead of an
    # empty ``items`` array.
    empty_list_is_error: bool = _env_flag("EMPTY_LIST_IS_ERROR", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
