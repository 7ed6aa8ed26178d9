# File: socialweb/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, ConfigDict, field_validator


class Settings(BaseModel):
    # env-derived defaults below still go through the validators
    model_config = ConfigDict(validate_default=True)

    PROJECT_NAME: str = "SocialWeb API"
    VERSION: str = "0.1.0"

    api_prefix: str = "/api/1.0"

    # CORS (the React sign-up page runs on :3000 in development)
    backend_cors_origins: List[str] = os.getenv(
        "SOCIALWEB_CORS_ORIGINS", "http://localhost:3000"
    )

    # Database
    database_url: str = os.getenv("SOCIALWEB_DATABASE_URL", "sqlite:///./socialweb.db")

    # Logging
    log_level: str = os.getenv("SOCIALWEB_LOG_LEVEL", "INFO")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
