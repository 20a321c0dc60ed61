"""
Application settings.

Values come from the environment (or a local .env file). Use get_settings()
instead of instantiating Settings directly so the process shares one copy.
"""

import functools

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "sqlite:///./milkcoop.db"
    API_PREFIX: str = "/api"
    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    BCRYPT_ROUNDS: int = 10
    RECENT_COLLECTIONS_LIMIT: int = 3

    HOST: str = "0.0.0.0"
    PORT: int = 3000


@functools.lru_cache()
def get_settings() -> Settings:
    """Get application settings (cached)."""
    return Settings()
