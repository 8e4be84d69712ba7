"""
Tests for CatalogConfig loading and validation.
"""

import pytest
import yaml

from catalog.config import CatalogConfig


class TestFromDict:
    def test_defaults(self):
        config = CatalogConfig.from_dict({})

        assert config.log_level == "WARNING"
        assert config.json_logs is False
        assert config.inputs == {}

    def test_level_is_normalised(self):
        assert CatalogConfig.from_dict({"log_level": "debug"}).log_level == "DEBUG"

    def test_invalid_level(self):
        with pytest.raises(ValueError, match="Invalid log level"):
            CatalogConfig.from_dict({"log_level": "LOUD"})

    @pytest.mark.parametrize("inputs", [["state"], {"state": ["start"]}, "chain"])
    def test_inputs_must_be_mapping_of_mappings(self, inputs):
        with pytest.raises(ValueError, match="inputs"):
            CatalogConfig.from_dict({"inputs": inputs})

    def test_inputs_for_returns_copy(self):
        config = CatalogConfig.from_dict({"inputs": {"state": {"events": ["start"]}}})
        inputs = config.inputs_for("state")
        inputs["extra"] = 1

        assert config.inputs_for("state") == {"events": ["start"]}
        assert config.inputs_for("adapter") == {}


class TestYaml:
    def test_round_trip(self, tmp_path):
        path = tmp_path / "nested" / "catalog.yaml"
        config = CatalogConfig(
            log_level="INFO",
            json_logs=True,
            inputs={"proxy": {"token": "valid-token"}},
        )

        config.to_yaml(path)
        loaded = CatalogConfig.from_yaml(path)

        assert loaded == config

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            CatalogConfig.from_yaml(tmp_path / "absent.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert CatalogConfig.from_yaml(path) == CatalogConfig()

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("inputs: [unclosed", encoding="utf-8")

        with pytest.raises(yaml.YAMLError):
            CatalogConfig.from_yaml(path)


class TestFromEnv:
    def test_no_environment(self):
        assert CatalogConfig.from_env({}) == CatalogConfig()

    def test_config_path_and_level_override(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("log_level: ERROR\ninputs:\n  chain:\n    min_length: 4\n", encoding="utf-8")

        config = CatalogConfig.from_env(
            {"CATALOG_CONFIG": str(path), "CATALOG_LOG_LEVEL": "debug"}
        )

        assert config.log_level == "DEBUG"
        assert config.inputs_for("chain") == {"min_length": 4}

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "info")

        assert CatalogConfig.from_env().log_level == "INFO"
