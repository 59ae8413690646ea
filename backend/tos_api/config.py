"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - tos_data_dir is read-only from the service's point of view

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - Defaults provided for every setting: tos_data_dir ("data") resolves against the
      working directory, so run the server from backend/ or set TOS_DATA_DIR
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage — directory of externally managed plain-text ToS files
    tos_data_dir: Path = Path("data")

    @field_validator("tos_data_dir", mode="after")
    @classmethod
    def expand_user_home(cls, v: Path) -> Path:
        return v.expanduser()

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
