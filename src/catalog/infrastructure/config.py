"""Runtime settings loaded from environment variables and ``.env`` files."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-wide configuration.

    ``store_backend`` decides, once at startup, which ProductRepository
    implementation the composition root builds.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = Field(default="development")
    log_level: str = Field(default="INFO")

    project_name: str = Field(default="Product Catalog API")
    api_version: str = Field(default="1.0.0")

    store_backend: Literal["memory", "sql"] = Field(default="memory")
    database_url: str = Field(default="sqlite:///./catalog.db")
    seed_sample_data: bool = Field(default=True)


@lru_cache
def get_settings() -> Settings:
    return Settings()
