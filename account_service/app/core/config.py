"""
Application configuration read from the environment.

``Settings`` is a plain dataclass whose defaults are taken from
environment variables at import time.  Other modules import the
module-level ``settings`` instance; tests may patch its attributes
directly because database and logging helpers read them at call time.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Account Service API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database holding accounts and contacts.  A
    # relative path is resolved against the project root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "accounts.db")

    # When true, the text of unexpected failures is returned to callers
    # in the response ``message``.  When false callers receive a generic
    # message and the details only go to the log.
    expose_internal_errors: bool = _env_flag("EXPOSE_INTERNAL_ERRORS", "true")


settings = Settings()
