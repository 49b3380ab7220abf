from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="POLYLINE_",
        case_sensitive=False,
    )

    # Precision applied when a request does not carry one (Google default).
    default_precision: int = 5

    # Request size limits; paths are handled as whole in-memory values.
    max_path_points: int = 100_000
    max_encoded_length: int = 1_000_000

    # Cookie/CORS (browser map clients)
    cors_allow_origin: str = "http://localhost:3000"
    cors_allow_credentials: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()
