"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
portal starts with the bundled demo dataset and no extra setup.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


# Directory of the ``app`` package; bundled demo data lives under ``data``.
APP_DIR = Path(__file__).resolve().parent.parent


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Cổng Dịch vụ công API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Host and port used by ``run.py`` when launching uvicorn.
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # Directory containing ``services.json`` and ``demo.json``.  A
    # relative path is resolved against the ``app`` package directory by
    # ``resolve_data_dir``.
    data_dir: str = os.getenv("DATA_DIR", "data")

    # Number of attempts a code generator makes before giving up on
    # finding an unused code.
    code_max_attempts: int = int(os.getenv("CODE_MAX_ATTEMPTS", "20"))

    # Election day; the results endpoint reports a countdown until then.
    election_date: str = os.getenv("ELECTION_DATE", "2026-05-24T07:00:00")


def resolve_data_dir(data_dir: str) -> Path:
    """Return an absolute path for ``data_dir``."""
    path = Path(data_dir)
    if path.is_absolute():
        return path
    return (APP_DIR / path).resolve()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
