"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables, so the service runs without a settings file.
Defaults are provided for all fields and are suitable for local
development.  In a deployment, override them through the environment
(for example in the container definition).
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "TennisBot Order API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # All routes are mounted below this prefix.
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")

    # Optional static token protecting the ``/admin`` routes.  When empty
    # the admin routes are open, which matches the storefront deployment
    # where the dashboard talks to the API with a public key only.
    admin_token: str = os.getenv("ADMIN_TOKEN", "")

    # Comma‑separated list of allowed CORS origins, ``*`` for any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    # Path to the SQLite file holding the key‑value table.  Relative
    # paths are resolved against the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "tennisbot.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
