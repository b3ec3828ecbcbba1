"""Configuration settings and loading."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PactumSettings(BaseSettings):
    """Configuration for pactum and its mock-service client."""

    model_config = SettingsConfigDict(
        env_prefix="PACTUM_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    mock_service_host: str = "127.0.0.1"
    mock_service_port: int = Field(default=1234, ge=1, le=65535)
    mock_service_scheme: str = "http"
    timeout: float = Field(default=30.0, gt=0)
    log_level: str = "WARNING"
    log_json: bool = False

    @field_validator("mock_service_scheme", mode="before")
    @classmethod
    def validate_scheme(cls, v: str) -> str:
        v = str(v).lower()
        if v not in ("http", "https"):
            raise ValueError("mock_service_scheme must be 'http' or 'https'")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = str(v).upper()
        if v not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return v

    @property
    def mock_service_url(self) -> str:
        return f"{self.mock_service_scheme}://{self.mock_service_host}:{self.mock_service_port}"


def load_settings(config_path: str | Path | None = None) -> PactumSettings:
    """Load settings from a YAML file and the environment.

    Priority: env vars > config file > defaults
    """
    config_data: dict[str, Any] = {}

    if config_path is not None:
        config_path = Path(config_path)
        if config_path.exists():
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}

    env_overrides = _get_env_overrides()
    config_data.update(env_overrides)

    return PactumSettings(**config_data)


def _get_env_overrides() -> dict[str, Any]:
    """Get configuration overrides from environment variables."""
    overrides: dict[str, Any] = {}

    for name in PactumSettings.model_fields:
        value = os.environ.get(f"PACTUM_{name.upper()}")
        if value is not None:
            overrides[name] = value

    return overrides
