# product_api/config.py
"""
Runtime configuration for the Product API.

``Settings`` reads its values from environment variables, with a default
for every field.  The environment is read each time a ``Settings()`` is
built, so a process that changes its environment (or a test using
``monkeypatch.setenv``) gets the new values.  A module-level ``settings``
instance is created at import time for the default app.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional


def _env(name: str, default: str):
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Product API")
    api_version: str = _env("API_VERSION", "1.0.0")
    host: str = _env("HOST", "0.0.0.0")
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Shared secret expected in the ``x-api-key`` header of every
    # /api/products request.
    api_key: str = _env("API_KEY", "mysecretkey")

    log_level: str = _env("LOG_LEVEL", "INFO")
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Comma-separated list, "*" allows any origin.
    cors_origins: str = _env("CORS_ORIGINS", "*")

    @property
    def allowed_origins(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
