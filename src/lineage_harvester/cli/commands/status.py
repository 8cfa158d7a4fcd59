# src/lineage_harvester/cli/commands/status.py
# Implementation of `harvester status` command.
"""
Probes the lineage collector's status resource.

Exit codes:
    0  collector reachable and initialized
    1  collector unreachable, not initialized, or not configured
"""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from lineage_harvester.core.config import HarvesterConfig, load_config
from lineage_harvester.dispatcher import HttpLineageDispatcher
from lineage_harvester.exceptions import ConfigurationError, ProducerNotInitializedError

console = Console()


def status_command(
    producer_url: Optional[str] = typer.Option(
        None, "--producer-url", "-u", help="Collector URL (overrides the config file)"
    ),
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file path"
    ),
) -> None:
    """Check that the lineage collector is ready to accept lineage."""
    try:
        config = load_config(config_path) or HarvesterConfig()
        if producer_url:
            config = config.model_copy(update={"producer_url": producer_url})
        dispatcher = HttpLineageDispatcher.from_config(config)
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    with dispatcher:
        try:
            dispatcher.ensure_producer_ready()
        except ProducerNotInitializedError as e:
            color = "yellow" if e.connected else "red"
            console.print(f"[{color}]{e}[/{color}]")
            raise typer.Exit(1)

    console.print(f"[green]✓ Collector at {dispatcher.base_url} is ready[/green]")
