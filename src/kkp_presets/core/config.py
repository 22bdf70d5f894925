"""Configuration management for kkp-presets."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from kkp_presets.core.exceptions import ConfigurationError


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    format: str = "json"
    output: str = "stdout"


class PresetEntry(BaseModel):
    """A named preset as written in the presets file.

    Provider sections stay raw (wire-keyed mappings) until they are decoded
    through a preset registry.
    """

    name: str
    providers: dict[str, dict[str, Any] | None] = Field(default_factory=dict)


class PresetsConfig(BaseModel):
    """Main presets file configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    presets: list[PresetEntry] = Field(default_factory=list)

    @classmethod
    def from_file(cls, path: str | Path) -> "PresetsConfig":
        """Load configuration from YAML file.

        Args:
            path: Path to configuration file

        Returns:
            PresetsConfig instance

        Raises:
            ConfigurationError: If file cannot be loaded or parsed
        """
        config_path = Path(path).expanduser()

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Invalid configuration: expected a mapping, got {type(data).__name__}"
            )

        try:
            return cls(**data)
        except Exception as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
