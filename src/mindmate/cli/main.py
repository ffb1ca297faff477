"""
MindMate CLI — `mindmate` command.

Commands:
  mindmate chat            Interactive REPL chat
  mindmate send <message>  One-shot message
  mindmate config <cmd>    Show or save settings
"""

import asyncio
import logging
from typing import Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install mindmate[cli]")

from mindmate.client import AsyncMindMate
from mindmate.config import Settings, load_settings
from mindmate.errors import ConfigError

console = Console()


def _get_settings(ctx: click.Context) -> Settings:
    obj = ctx.find_root().obj or {}
    try:
        return load_settings(endpoint=obj.get("endpoint"))
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


def _get_client(ctx: click.Context) -> AsyncMindMate:
    return AsyncMindMate(settings=_get_settings(ctx))


def _run(coro):
    return asyncio.run(coro)


@click.group()
@click.version_option("0.1.0")
@click.option("--endpoint", default=None, help="Override the generation endpoint URL.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, endpoint: Optional[str], verbose: bool):
    """MindMate X — your AI mental health companion."""
    ctx.ensure_object(dict)
    ctx.obj["endpoint"] = endpoint
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands from separate modules
from mindmate.cli.chat import chat_cmd, send_cmd
from mindmate.cli.config import config

main.add_command(chat_cmd)
main.add_command(send_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
