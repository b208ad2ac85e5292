"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an SQLite file next to the package.  In a
production deployment override these via environment variables or an
``.env`` file loaded by the process manager.
"""

import os
from dataclasses import dataclass
from typing import Optional


# Values accepted by ``SCHEMA_MODE``.  ``update`` applies pending
# migrations at startup; ``validate`` expects the schema to exist already.
SCHEMA_MODES = ("update", "validate")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  If a relative path is provided,
    # it will be resolved relative to the project root by the ``db``
    # module.  Every storage call opens its own connection, so an
    # in-memory database (``:memory:``) is not supported.
    database_url: str = os.getenv("DATABASE_URL", "user_directory.db")

    schema_mode: str = os.getenv("SCHEMA_MODE", "update").lower()

    # Prefix for all routes.  Empty by default so the user resource is
    # served at ``/user``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    def __post_init__(self) -> None:
        if self.schema_mode not in SCHEMA_MODES:
            raise ValueError(
                f"SCHEMA_MODE must be one of {', '.join(SCHEMA_MODES)}, got {self.schema_mode!r}"
            )


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()
