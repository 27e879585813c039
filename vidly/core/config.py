"""Configuration for the Vidly rental service."""

import os
from functools import lru_cache
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _to_bool(value: str, *, default: bool = False) -> bool:
    lowered = value.strip().lower()
    if not lowered:
        return default
    return lowered in {"true", "1", "yes", "y", "on"}


class Settings:
    """Application settings loaded from environment variables.

    Keyword overrides take precedence over the environment, which lets tests
    and embedding code build a fully explicit configuration.
    """

    def __init__(self, **overrides: Any) -> None:
        self.PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Vidly Service")
        self.DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./vidly.db")
        self.SECRET_KEY: str = os.getenv("SECRET_KEY", "change_me")
        self.ALGORITHM: str = os.getenv("ALGORITHM", "HS256")
        self.ACCESS_TOKEN_EXPIRE_MINUTES: int = int(
            os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60")
        )
        self.REQUIRE_AUTH: bool = _to_bool(os.getenv("REQUIRE_AUTH", "true"), default=True)
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
        self.API_PREFIX: str = os.getenv("API_PREFIX", "/api")

        for key, value in overrides.items():
            if not hasattr(self, key):
                raise AttributeError(f"Unknown setting: {key}")
            setattr(self, key, value)


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
