"""Configuration management - settings from env, reference data from YAML."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_REGISTRY_PATH = Path(__file__).parent / "data" / "registry.yaml"


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root log level for the CLI")

    # Reference data
    registry_path: Path | None = Field(
        default=None,
        description="Alternative milestone registry YAML (defaults to the bundled file)",
    )
    default_cultural_profile: str | None = Field(
        default=None,
        description="Cultural profile id used when a user has not chosen one",
    )

    # Data
    data_dir: Path = Field(default=Path("data"), description="Directory for JSON persistence")
    redis_url: str | None = Field(default=None, description="Redis URL for cloud persistence (e.g. Upstash)")


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open() as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


@lru_cache
def get_registry_data(registry_path_str: str = "") -> dict[str, Any]:
    """Load raw milestone registry data. Parsed and validated by the registry package."""
    if not registry_path_str:
        registry_path = get_settings().registry_path or DEFAULT_REGISTRY_PATH
    else:
        registry_path = Path(registry_path_str)
    return load_yaml_config(registry_path)
