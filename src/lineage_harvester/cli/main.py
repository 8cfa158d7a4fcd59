# src/lineage_harvester/cli/main.py
# Main CLI entrypoint for the lineage harvester.
"""
Main Typer application with all sub-commands.

Usage:
    harvester init --producer-url http://collector:8080/producer
    harvester status
    harvester --log-level DEBUG status
"""

import typer
from rich.console import Console

from lineage_harvester import __version__
from lineage_harvester.cli.commands import init, status
from lineage_harvester.logging import configure_logging

app = typer.Typer(
    name="harvester",
    help="Lineage harvester: read extraction and collector dispatch",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()

app.command("init")(init.init_command)
app.command("status")(status.status_command)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", help="Show version and exit"),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level"),
) -> None:
    """Lineage harvester CLI."""
    if version:
        console.print(f"[bold]harvester[/bold] version {__version__}")
        raise typer.Exit()
    configure_logging(log_level)
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


if __name__ == "__main__":
    app()
