# src/lineage_harvester/core/config.py
# Configuration management for the lineage harvester.
"""
Configuration models and loading utilities.

The config file (.harvester.yaml) stores:
- Collector (producer) URL and request timeout
- Filesystem and warehouse defaults for path qualification
- Type names of add-on relations, for components that relocate their classes
- Log level
"""

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from lineage_harvester.exceptions import ConfigurationError
from lineage_harvester.plan import (
    EXCEL_RELATION_TYPE,
    JDBC_RELATION_TYPE,
    KAFKA_RELATION_TYPE,
)

CONFIG_FILE_NAME = ".harvester.yaml"


class RelationTypes(BaseModel):
    """Fully-qualified type names of relations from optional components."""

    jdbc: str = Field(default=JDBC_RELATION_TYPE, description="JDBC relation type")
    kafka: str = Field(default=KAFKA_RELATION_TYPE, description="Kafka relation type")
    excel: str = Field(default=EXCEL_RELATION_TYPE, description="Excel relation type")


class HarvesterConfig(BaseModel):
    """Harvester configuration model."""

    version: str = Field(default="1.0", description="Config version")
    producer_url: Optional[str] = Field(
        default=None,
        description="Base URL of the lineage collector REST endpoint",
    )
    timeout_seconds: float = Field(default=30.0, gt=0, description="HTTP request timeout")
    log_level: str = Field(default="INFO", description="Root log level")
    default_fs: str = Field(
        default="file:",
        description="Filesystem URI used to qualify paths without a scheme",
    )
    working_dir: Optional[str] = Field(
        default=None,
        description="Directory relative paths are resolved against (default: cwd)",
    )
    warehouse_dir: str = Field(
        default="file:/user/hive/warehouse",
        description="Location of managed catalog tables",
    )
    relation_types: RelationTypes = Field(default_factory=RelationTypes)


# Global config cache
_cached_config: Optional[HarvesterConfig] = None
_config_path: Optional[Path] = None


def load_config(path: Optional[Path] = None) -> Optional[HarvesterConfig]:
    """
    Load harvester configuration from file.

    Searches for config in order:
    1. Specified path (must exist)
    2. Current directory (.harvester.yaml)
    3. Home directory (~/.harvester.yaml)

    Returns None if no config found.
    """
    global _cached_config, _config_path

    if _cached_config and (path is None or path == _config_path):
        return _cached_config

    search_paths = []
    if path:
        if not path.exists():
            raise ConfigurationError(f"Config file not found: {path}")
        search_paths.append(path)
    search_paths.extend([
        Path(CONFIG_FILE_NAME),
        Path.home() / CONFIG_FILE_NAME,
    ])

    config_file = None
    for p in search_paths:
        if p.exists():
            config_file = p
            break

    if not config_file:
        return None

    with open(config_file) as f:
        data = yaml.safe_load(f) or {}

    try:
        config = HarvesterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_file}: {e}") from e

    _cached_config = config
    _config_path = config_file

    return config


def clear_config_cache() -> None:
    """Clear the cached configuration."""
    global _cached_config, _config_path
    _cached_config = None
    _config_path = None
