"""Application settings loaded from environment variables via pydantic-settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogFormat(StrEnum):
    json = "json"
    console = "console"


class Settings(BaseSettings):
    """Central configuration: all values sourced from env vars or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ── Service ─────────────────────────────────────────────────────────────
    app_name: str = "AgriSmart API"
    cors_allow_origins: list[str] = ["*"]

    # ── Reference data ──────────────────────────────────────────────────────
    # Empty means "use the JSON files packaged under agrismart/data".
    prediction_profiles_path: str = ""
    reference_data_dir: str = ""

    # ── Crop health ─────────────────────────────────────────────────────────
    inspection_lead_days: int = 1

    # ── Observability ───────────────────────────────────────────────────────
    log_level: str = "info"
    log_format: LogFormat = LogFormat.json
    slow_request_ms: float = 1000.0


@lru_cache
def get_settings() -> Settings:
    """Singleton settings instance (cached after first call)."""
    return Settings()
