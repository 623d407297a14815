"""
Tests for Pydantic-based reader configuration.
"""

import json

import pytest
from pydantic import ValidationError

from sim_output_parser.config_models import ReaderConfig


class TestConfigValidation:
    """Test configuration validation."""

    def test_defaults(self):
        config = ReaderConfig()
        assert config.default_value == 0.0
        assert config.encoding == "utf-8"
        assert config.sidecar_suffix == ".columns"
        assert config.progress_interval == 10000
        assert config.time_names == ["t", "TIME", "$t"]

    def test_sidecar_suffix_needs_dot(self):
        with pytest.raises(ValidationError) as exc_info:
            ReaderConfig(sidecar_suffix="columns")
        assert "sidecar_suffix" in str(exc_info.value)

    def test_empty_time_names(self):
        with pytest.raises(ValidationError):
            ReaderConfig(time_names=[])

    def test_duplicate_time_names(self):
        """Test that duplicate time names raise validation error."""
        with pytest.raises(ValidationError) as exc_info:
            ReaderConfig(time_names=["t", "TIME", "t"])
        assert "duplicate" in str(exc_info.value).lower()

    def test_negative_progress_interval(self):
        with pytest.raises(ValidationError):
            ReaderConfig(progress_interval=-1)


class TestConfigLoading:
    """Test loading configuration from dicts and files."""

    def test_from_dict(self):
        config = ReaderConfig.from_dict({"default_value": -1, "time_names": ["time"]})
        assert config.default_value == -1.0
        assert config.time_names == ["time"]

    def test_from_json_file(self, tmp_path):
        config_file = tmp_path / "reader.json"
        config_file.write_text(json.dumps({"sidecar_suffix": ".names", "progress_interval": 0}))

        config = ReaderConfig.from_json_file(str(config_file))
        assert config.sidecar_suffix == ".names"
        assert config.progress_interval == 0

    def test_missing_json_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ReaderConfig.from_json_file(str(tmp_path / "missing.json"))

    def test_invalid_json_config(self, tmp_path):
        config_file = tmp_path / "reader.json"
        config_file.write_text(json.dumps({"progress_interval": "often"}))
        with pytest.raises(ValidationError):
            ReaderConfig.from_json_file(str(config_file))
