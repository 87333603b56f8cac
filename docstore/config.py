"""Library Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting has a default: the store works with no environment at all
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - DOCSTORE_ prefix: the host application's own variables never collide
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """docstore settings from DOCSTORE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="DOCSTORE_", env_file=".env", extra="ignore",
    )

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        """Accept any casing; anything other than json falls back to text."""
        if isinstance(v, str) and v.strip().lower() == "json":
            return "json"
        return "text"


@lru_cache
def get_settings() -> Settings:
    return Settings()
