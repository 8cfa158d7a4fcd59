# src/lineage_harvester/cli/commands/init.py
# Implementation of `harvester init` command.
"""
Creates a local configuration file (.harvester.yaml) with default settings.
"""

from pathlib import Path
from typing import Optional

import typer
import yaml
from rich.console import Console
from rich.panel import Panel

from lineage_harvester.core.config import CONFIG_FILE_NAME, HarvesterConfig

console = Console()


def init_command(
    producer_url: Optional[str] = typer.Option(
        None, "--producer-url", "-u", help="Base URL of the lineage collector"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
    path: Path = typer.Option(
        Path(CONFIG_FILE_NAME), "--path", "-p", help="Config file path"
    ),
) -> None:
    """Write a harvester configuration file."""
    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow]")
        console.print("Use --force to overwrite")
        raise typer.Exit(1)

    config = HarvesterConfig(producer_url=producer_url)

    console.print(Panel(
        f"[bold]Producer URL:[/bold] {config.producer_url or '(not set)'}\n"
        f"[bold]Default FS:[/bold] {config.default_fs}\n"
        f"[bold]Warehouse:[/bold] {config.warehouse_dir}",
        title="Harvester Config",
    ))

    with open(path, "w") as f:
        yaml.dump(config.model_dump(mode="json"), f, default_flow_style=False, sort_keys=False)

    console.print(f"\n[green]✓ Created config at {path}[/green]")
    if not config.producer_url:
        console.print("Set [cyan]producer_url[/cyan] before running [cyan]harvester status[/cyan]")
