# src/lineage_harvester/cli/commands/__init__.py
# CLI sub-commands.
