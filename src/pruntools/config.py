"""Application settings loaded from environment variables."""

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Prun Tools configuration from .env file."""

    base_url: str = "https://rest.fnar.net"
    fio_api_key: str = ""
    kawa_url: str = "https://kawapi.dizzy.zone/api/collections/kawa_pricing/records"
    kawa_planet: str = "Proxion"
    data_dir: Path = Path("data")
    log_level: str = "INFO"

    model_config = {"env_prefix": "PRUNTOOLS_", "env_file": ".env"}


def load_settings() -> Settings:
    """Load and return application settings."""
    return Settings()
