"""CLI: mindmate chat, mindmate send"""

import json

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mindmate.models.message import Message, Sender

console = Console()

# REPL shortcuts for the wellness quick actions
QUICK_PROMPTS = {
    "/calm": "Help me with a quick calming exercise",
    "/gratitude": "Let's practice gratitude - what should I focus on?",
    "/relax": "I need a quick relaxation technique",
    "/quote": "Share an inspiring quote for my day",
    "/tip": "Tell me more about this wellness tip",
}


def _get_client(ctx: click.Context):
    from mindmate.cli.main import _get_client
    return _get_client(ctx)


def _run(coro):
    from mindmate.cli.main import _run
    return _run(coro)


def _print_message(message: Message, assistant_name: str) -> None:
    if message.sender == Sender.ASSISTANT:
        console.print(f"[green]{assistant_name}:[/green] {escape(message.text)}")
    else:
        console.print(f"[cyan]You:[/cyan] {escape(message.text)}")


def _print_shortcuts() -> None:
    table = Table(title="Shortcuts")
    table.add_column("Command", style="bold")
    table.add_column("Sends")
    for command, prompt in QUICK_PROMPTS.items():
        table.add_row(command, prompt)
    console.print(table)

@click.command("chat")
@click.pass_context
def chat_cmd(ctx: click.Context):
    """Interactive chat with MindMate. Type /help for shortcuts."""

    async def _chat():
        client = _get_client(ctx)
        name = client.settings.assistant_name
        session = client.new_session()
        _print_message(session.messages[0], name)
        console.print("[dim]Type your message (/help for shortcuts, /quit to exit)[/dim]\n")
        try:
            while True:
                msg = click.prompt("You", prompt_suffix=": ", default="", show_default=False)
                command = msg.strip().lower()
                if command in ("/quit", "/exit"):
                    break
                if command == "/help":
                    _print_shortcuts()
                    continue
                if command.startswith("/"):
                    if command not in QUICK_PROMPTS:
                        console.print(f"[yellow]Unknown command {escape(command)}. Try /help.[/yellow]")
                        continue
                    msg = QUICK_PROMPTS[command]
                    console.print(f"[cyan]You:[/cyan] {escape(msg)}")
                task = session.submit(msg)
                if task is None:
                    continue
                with console.status(f"{name} is typing..."):
                    reply = await task
                _print_message(reply, name)
                console.print(f"[dim]mood: {session.current_emotion.value}[/dim]")
        except (KeyboardInterrupt, EOFError, click.Abort):
            pass
        finally:
            await client.close()

    _run(_chat())


@click.command("send")
@click.argument("message")
@click.option("--json-output", "--json", is_flag=True)
@click.pass_context
def send_cmd(ctx: click.Context, message: str, json_output: bool):
    """Send a one-shot message."""

    async def _send():
        async with _get_client(ctx) as client:
            session = client.new_session()
            reply = await session.send(message)
            if reply is None:
                raise click.UsageError("Message must not be blank.")
            if json_output:
                click.echo(json.dumps({
                    "reply": reply.text,
                    "emotion": session.current_emotion.value,
                    "timestamp": reply.timestamp.isoformat(),
                }))
            else:
                _print_message(reply, client.settings.assistant_name)

    _run(_send())
