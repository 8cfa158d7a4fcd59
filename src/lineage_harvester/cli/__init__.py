# src/lineage_harvester/cli/__init__.py
# CLI package for the lineage harvester.
"""
CLI module providing the `harvester` command-line interface.

Commands:
- harvester init: Create a local config file
- harvester status: Check that the lineage collector is ready
"""

from lineage_harvester.cli.main import app

__all__ = ["app"]
