"""CLI: mindmate config show|set-endpoint"""

import json

import click
from rich.console import Console
from rich.table import Table

from mindmate.config import save_settings

console = Console()


def _get_settings(ctx: click.Context):
    from mindmate.cli.main import _get_settings
    return _get_settings(ctx)


@click.group()
def config():
    """Settings management."""


@config.command("show")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def config_show(ctx: click.Context, json_output: bool):
    """Show effective settings."""
    settings = _get_settings(ctx)
    if json_output:
        click.echo(json.dumps(settings.model_dump(), indent=2))
        return
    table = Table(title="MindMate settings")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


@config.command("set-endpoint")
@click.argument("url")
@click.pass_context
def config_set_endpoint(ctx: click.Context, url: str):
    """Persist the generation endpoint to the config file."""
    settings = _get_settings(ctx).model_copy(update={"endpoint": url})
    path = save_settings(settings)
    console.print(f"[green]Endpoint saved to {path}[/green]")
