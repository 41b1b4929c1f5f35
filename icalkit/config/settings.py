"""Settings management using Pydantic for type validation and configuration."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from icalkit.merger.models import DuplicateHandling
from icalkit.splitter.models import DEFAULT_CHUNK_SIZE, SortOrder
from icalkit.utils.logging import LOG_LEVELS

logger = logging.getLogger(__name__)

ENV_PREFIX = "ICALKIT_"

YAML_SETTINGS = (
    "chunk_size",
    "sort_by",
    "file_name_pattern",
    "output_dir",
    "duplicates",
    "log_level",
    "log_colors",
)


def find_config_file(explicit: Optional[Path] = None) -> Optional[Path]:
    """Find config file: explicit path, then ./config, then the user directory."""
    if explicit is not None:
        explicit = Path(explicit)
        return explicit if explicit.exists() else None

    project_config = Path.cwd() / "config" / "config.yaml"
    if project_config.exists():
        return project_config

    user_config = Path.home() / ".config" / "icalkit" / "config.yaml"
    if user_config.exists():
        return user_config

    return None


def load_yaml_config(config_file: Optional[Path]) -> dict[str, Any]:
    """Read the known settings keys from a YAML file.

    A missing or unreadable file yields an empty mapping; the command then
    runs on environment values and defaults.
    """
    if config_file is None:
        return {}

    try:
        with config_file.open(encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not load YAML config from {config_file}: {e}")
        return {}

    if not isinstance(config_data, dict):
        return {}

    return {key: config_data[key] for key in YAML_SETTINGS if key in config_data}


class ICalKitSettings(BaseSettings):
    """Application settings with environment variable and YAML support.

    Precedence: explicit arguments > ICALKIT_* environment > config.yaml > defaults.
    """

    # Path of the applied YAML file
    _config_path: Optional[Path] = PrivateAttr(default=None)

    # Split defaults
    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE, gt=0, description="Events per chunk when splitting"
    )
    sort_by: SortOrder = Field(default=SortOrder.DTSTART, description="Event order for split")
    file_name_pattern: Optional[str] = Field(
        default=None, description="Chunk file name pattern with {n} and {total}"
    )
    output_dir: Path = Field(default=Path("."), description="Directory for split output")

    # Merge defaults
    duplicates: DuplicateHandling = Field(
        default=DuplicateHandling.WARN, description="Duplicate handling: keep-all, remove, warn"
    )

    # Logging
    log_level: str = Field(
        default="INFO", description="Console log level: DEBUG, VERBOSE, INFO, WARNING, ERROR"
    )
    log_colors: bool = Field(default=True, description="Colored console output on terminals")

    # Config file location override
    config_file: Optional[Path] = Field(default=None, description="Explicit config.yaml path")

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown levels."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    def __init__(self, **kwargs: Any) -> None:
        # Track which settings come from the environment so YAML does not shadow them
        env_vars_set = {
            key[len(ENV_PREFIX):].lower()
            for key in os.environ
            if key.upper().startswith(ENV_PREFIX)
        }

        explicit_file = kwargs.get("config_file") or os.environ.get(f"{ENV_PREFIX}CONFIG_FILE")
        config_path = find_config_file(Path(explicit_file) if explicit_file else None)
        yaml_values = {
            key: value
            for key, value in load_yaml_config(config_path).items()
            if key not in kwargs and key not in env_vars_set
        }

        super().__init__(**{**yaml_values, **kwargs})

        self._config_path = config_path
        if config_path is not None:
            logger.debug(f"Loaded settings from {config_path}: {', '.join(sorted(yaml_values))}")

    @property
    def loaded_config_path(self) -> Optional[Path]:
        """Path of the YAML file that was applied, if any."""
        return self._config_path


# Global settings management
_settings_instance: Optional[ICalKitSettings] = None


def get_settings() -> ICalKitSettings:
    """Get the global settings instance, creating it lazily if needed."""
    if globals()["_settings_instance"] is None:
        globals()["_settings_instance"] = ICalKitSettings()
    return globals()["_settings_instance"]


def reset_settings() -> None:
    """Reset the global settings instance (primarily for testing)."""
    globals()["_settings_instance"] = None
