# src/lineage_harvester/core/__init__.py
# Core modules for the lineage harvester.
"""
Core functionality:
- config: Configuration management
"""

from lineage_harvester.core.config import HarvesterConfig, RelationTypes, load_config

__all__ = ["HarvesterConfig", "RelationTypes", "load_config"]
