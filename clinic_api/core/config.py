# clinic_api/core/config.py
from __future__ import annotations

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Which resource this process serves: "appointments" or "patients"
    SERVICE: str = "appointments"

    HOST: str = "0.0.0.0"
    PORT: int = 3000
    ENVIRONMENT: str = "development"

    # Comma separated list, "*" allows any origin
    CORS_ORIGINS: str = "*"

    LOG_LEVEL: str = "INFO"
    # Structured event dumps (see services/logger.py)
    DEBUG_EVENTS: bool = False

    # If you want to read from a .env file, keep this:
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
