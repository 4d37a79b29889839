"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    STORAGE_BACKEND: str = "file"  # file | memory
    STORAGE_PATH: str = ".eventhub/storage.json"
    SEED_DEMO_EVENTS: bool = True
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
