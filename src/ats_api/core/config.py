from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

# Environments that must run against a server database
_PRODUCTION_ENVIRONMENTS = {"production", "staging"}

# Heroku and similar hosts still hand out the pre-1.4 SQLAlchemy scheme
_LEGACY_POSTGRES_SCHEME = "postgres://"


class Settings(BaseSettings):
    """Service settings, read from ``ATS_API_*`` variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="ATS_API_",
        env_file=".env",
        case_sensitive=False,
    )

    app_name: str = Field(default="ats-api")
    app_version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Required, no default
    database_url: str = Field()
    sql_echo: bool = Field(default=False)
    # Create missing tables at startup, for local runs without migrations
    create_tables: bool = Field(default=False)

    api_prefix: str = Field(default="/api")
    request_id_header: str = Field(default="X-Request-ID")

    docs_enabled: bool = Field(default=True)
    openapi_url: str = Field(default="/openapi.json")
    docs_url: str = Field(default="/docs")
    redoc_url: str = Field(default="/redoc")

    # Comma-separated in the environment
    allow_origins: Annotated[list[str], NoDecode] = Field(default_factory=list)
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: list[str] = Field(default_factory=lambda: ["*"])
    cors_allow_headers: list[str] = Field(default_factory=lambda: ["*"])
    allowed_hosts: Annotated[list[str], NoDecode] = Field(default_factory=list)

    @field_validator("allow_origins", "allowed_hosts", mode="before")
    @classmethod
    def split_csv(cls, value: object) -> list[str] | object:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @field_validator("database_url")
    @classmethod
    def normalize_postgres_scheme(cls, value: str) -> str:
        if value.startswith(_LEGACY_POSTGRES_SCHEME):
            return "postgresql+psycopg://" + value[len(_LEGACY_POSTGRES_SCHEME):]
        return value

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level

    @model_validator(mode="after")
    def validate_database_url_for_environment(self) -> Settings:
        if self.is_production and self.database_url.startswith("sqlite"):
            raise ValueError(
                "SQLite is not recommended for production. "
                "Use PostgreSQL or another production database."
            )
        return self

    @property
    def is_production(self) -> bool:
        return self.environment in _PRODUCTION_ENVIRONMENTS


@lru_cache
def get_settings() -> Settings:
    return Settings()
