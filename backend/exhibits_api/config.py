"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting reads from an EXHIBITS_API_* environment variable or .env
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Bound port is configurable and the Docker image exposes the same default (8080)
    - data_dir is optional: when unset, data files are located relative to the
      working directory and the launched program (see file_locator)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EXHIBITS_API_", env_file=".env", case_sensitive=False,
    )

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Datasets
    data_dir: str | None = None
    exhibits_file: str = "exhibits.json"
    artefacts_file: str = "qm_data.json"

    @field_validator("data_dir", mode="before")
    @classmethod
    def blank_data_dir_is_none(cls, v):
        """An empty EXHIBITS_API_DATA_DIR means "not configured"."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # API
    cors_origins: list[str] = ["*"]
    cors_methods: list[str] = ["GET", "OPTIONS"]
    cors_headers: list[str] = ["Content-Type"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
