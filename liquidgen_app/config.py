"""
Application settings, read from LIQUIDGEN_* environment variables or .env.
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="LIQUIDGEN_",
        env_file=".env",
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    # CORS (kept for local dev convenience)
    cors_origins: List[str] = ["http://127.0.0.1:8000", "http://localhost:8000"]


settings = Settings()
