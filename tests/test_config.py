# tests/test_config.py
# Tests for configuration loading.

from pathlib import Path

import pytest
import yaml

from lineage_harvester.core.config import (
    HarvesterConfig,
    clear_config_cache,
    load_config,
)
from lineage_harvester.exceptions import ConfigurationError
from lineage_harvester.plan import JDBC_RELATION_TYPE


def write_config(path: Path, data: dict) -> Path:
    path.write_text(yaml.dump(data))
    return path


class TestLoadConfig:
    def test_defaults(self):
        config = HarvesterConfig()
        assert config.producer_url is None
        assert config.relation_types.jdbc == JDBC_RELATION_TYPE

    def test_load_explicit_path(self, tmp_path):
        path = write_config(
            tmp_path / "harvester.yaml",
            {
                "producer_url": "http://collector/producer",
                "timeout_seconds": 5,
                "relation_types": {"kafka": "io.vendor.KafkaRelation"},
            },
        )
        config = load_config(path)

        assert config.producer_url == "http://collector/producer"
        assert config.timeout_seconds == 5
        assert config.relation_types.kafka == "io.vendor.KafkaRelation"
        assert config.relation_types.jdbc == JDBC_RELATION_TYPE

    def test_cached(self, tmp_path):
        path = write_config(tmp_path / "harvester.yaml", {"log_level": "DEBUG"})
        first = load_config(path)
        path.write_text(yaml.dump({"log_level": "ERROR"}))

        assert load_config(path) is first
        clear_config_cache()
        assert load_config(path).log_level == "ERROR"

    def test_searches_current_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        write_config(tmp_path / ".harvester.yaml", {"producer_url": "http://cwd"})

        assert load_config().producer_url == "http://cwd"

    def test_missing_config(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        assert load_config() is None

    def test_explicit_path_must_exist(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        write_config(tmp_path / ".harvester.yaml", {"producer_url": "http://cwd"})

        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "typo.yaml")

    def test_invalid_config(self, tmp_path):
        path = write_config(tmp_path / "harvester.yaml", {"timeout_seconds": -1})
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            load_config(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "harvester.yaml"
        path.write_text("")
        assert load_config(path) == HarvesterConfig()
