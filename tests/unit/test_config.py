"""Tests for configuration management."""

from pathlib import Path

import pytest
import yaml

from kkp_presets.core.config import LoggingConfig, PresetsConfig
from kkp_presets.core.exceptions import ConfigurationError


def test_logging_config_defaults():
    """Test logging config defaults."""
    config = LoggingConfig()
    assert config.level == "INFO"
    assert config.format == "json"
    assert config.output == "stdout"


def test_presets_config_defaults():
    """Test that an empty config has no presets."""
    config = PresetsConfig()
    assert config.presets == []
    assert config.logging.level == "INFO"


def test_presets_config_from_dict():
    """Test creating PresetsConfig from dictionary."""
    config = PresetsConfig(
        **{
            "logging": {"level": "DEBUG"},
            "presets": [{"name": "team-a", "providers": {"eks": {"accessKeyID": "AKIA"}}}],
        }
    )

    assert config.logging.level == "DEBUG"
    assert config.presets[0].name == "team-a"
    assert config.presets[0].providers["eks"] == {"accessKeyID": "AKIA"}


def test_presets_config_from_file(presets_file: Path):
    """Test loading config from YAML file."""
    config = PresetsConfig.from_file(presets_file)

    assert config.logging.level == "WARNING"
    assert config.logging.output == "stderr"
    assert [p.name for p in config.presets] == ["team-a", "team-b", "disabled"]


def test_presets_config_file_not_found(tmp_path: Path):
    """Test loading a missing file raises ConfigurationError."""
    with pytest.raises(ConfigurationError, match="not found"):
        PresetsConfig.from_file(tmp_path / "missing.yaml")


def test_presets_config_invalid_yaml(tmp_path: Path):
    """Test loading malformed YAML raises ConfigurationError."""
    path = tmp_path / "broken.yaml"
    path.write_text("presets: [unclosed")

    with pytest.raises(ConfigurationError, match="Failed to load"):
        PresetsConfig.from_file(path)


def test_presets_config_not_a_mapping(tmp_path: Path):
    """Test that a top-level list is rejected."""
    path = tmp_path / "list.yaml"
    path.write_text(yaml.dump(["team-a"]))

    with pytest.raises(ConfigurationError, match="expected a mapping"):
        PresetsConfig.from_file(path)


def test_presets_config_invalid_schema(tmp_path: Path):
    """Test that a preset without a name is rejected."""
    path = tmp_path / "noname.yaml"
    path.write_text(yaml.dump({"presets": [{"providers": {}}]}))

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        PresetsConfig.from_file(path)


def test_presets_config_empty_file(tmp_path: Path):
    """Test that an empty file yields the default config."""
    path = tmp_path / "empty.yaml"
    path.write_text("")

    assert PresetsConfig.from_file(path).presets == []
