"""Configuration loading and validation."""

import json
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MockSettings(BaseSettings):
    """Engine-wide defaults for generated mocks."""

    model_config = SettingsConfigDict(
        env_prefix="DEEPMOCK_",
        case_sensitive=False,
        extra="ignore",
    )

    max_depth: int = Field(default=10, description="Deepest level the engine materializes")
    log_calls: bool = Field(default=False, description="Log every mock invocation at DEBUG")

    @field_validator("max_depth")
    @classmethod
    def validate_max_depth(cls, v: int) -> int:
        """Validate depth bound."""
        if v < 0:
            raise ValueError(f"Invalid max_depth: {v}. Must be >= 0")
        return v

    @classmethod
    def load(cls, config_path: Optional[Path | str] = None) -> "MockSettings":
        """Load settings from file, with DEEPMOCK_* environment variables taking precedence."""
        if config_path is None:
            config_path = find_config_file()
        elif isinstance(config_path, str):
            config_path = Path(config_path)

        config_dict: dict[str, Any] = {}
        if config_path and config_path.exists():
            # Load JSON or YAML based on file extension
            if config_path.suffix.lower() == ".json":
                with open(config_path, "r") as f:
                    config_dict = json.load(f) or {}
            else:
                # Default to YAML for .yaml, .yml, or no extension
                with open(config_path, "r") as f:
                    config_dict = yaml.safe_load(f) or {}

        # Init kwargs outrank the environment in pydantic-settings, so drop
        # file values that an environment variable is about to supply.
        env_settings = cls()
        for key in env_settings.model_fields_set:
            config_dict.pop(key, None)

        return cls(**config_dict)


def find_config_file() -> Optional[Path]:
    """Find config file in resolution order. Prefers JSON over YAML if both exist."""
    candidates = [
        Path(".deepmock"),
        Path.home() / ".config" / "deepmock",
    ]
    for directory in candidates:
        for filename in ("config.json", "config.yaml", "config.yml"):
            path = directory / filename
            if path.exists():
                return path

    return None


# Process-wide settings, loaded on first use
_settings: Optional[MockSettings] = None


def get_settings() -> MockSettings:
    """Get the active settings."""
    global _settings
    if _settings is None:
        _settings = MockSettings.load()
    return _settings


def set_settings(settings: Optional[MockSettings]) -> None:
    """Replace the active settings. None forces a reload on next use."""
    global _settings
    _settings = settings
