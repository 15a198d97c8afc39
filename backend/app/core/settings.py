# backend/app/core/settings.py

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATES_DATA = Path(__file__).resolve().parents[1] / "data" / "states_data.json"


class Settings(BaseSettings):
    # === App settings ===
    app_name: str = "US States API"
    api_version: str = "1.0.0"

    # === MongoDB ===
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_db: str = "states_api"
    funfacts_collection: str = "states"
    ensure_indexes_on_startup: bool = True

    # === Référentiel ===
    states_data_path: Path = DEFAULT_STATES_DATA

    # === HTTP ===
    cors_origins: list[str] = ["*"]

    # === LOGS ===
    log_dir: str = "logs"
    log_retention_days: int = 30

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """Instance unique des settings (lue une fois par process)."""
    return Settings()
