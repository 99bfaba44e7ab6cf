"""CLI: zoomer replay, zoomer parse"""

import json
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from zoomer.commands import parse_command
from zoomer.config import BotConfig
from zoomer.dispatch import Dispatcher
from zoomer.errors import DecodeError, EmptyCommandError
from zoomer.session import RecordingSession

console = Console()


def _load_config() -> BotConfig:
    from zoomer.cli.main import _load_config
    return _load_config()


@click.command("replay")
@click.argument("frames_file", type=click.File("r"))
@click.option("--self-id", type=int, default=None, help="The bot's own participant id")
@click.option("--stop-on-error", is_flag=True, help="Abort on the first undecodable frame")
@click.option("--json-output", "--json", is_flag=True)
def replay_cmd(frames_file, self_id: Optional[int], stop_on_error: bool, json_output: bool):
    """Replay JSON-lines frames and print what the bot would do."""
    cfg = _load_config()
    if stop_on_error:
        cfg = cfg.model_copy(update={"stop_on_decode_error": True})
    uid = self_id if self_id is not None else cfg.self_user_id
    if uid is None:
        raise click.UsageError("--self-id is required (or set self_user_id in config)")

    session = RecordingSession(self_user_id=uid)
    frames = (line for line in frames_file if line.strip())
    try:
        stats = Dispatcher(cfg).pump(session, frames)
    except DecodeError as e:
        console.print(f"[red]Stopped: {e}[/red]")
        raise SystemExit(1)

    if json_output:
        for call in session.calls:
            click.echo(json.dumps({"call": call.name, "args": list(call.args)}))
        click.echo(json.dumps(stats.as_dict()))
        return

    table = Table(title=f"Session intents ({len(session.calls)})")
    table.add_column("#", justify="right")
    table.add_column("Call", style="bold")
    table.add_column("Arguments")
    for i, call in enumerate(session.calls, 1):
        table.add_row(str(i), call.name, ", ".join(repr(a) for a in call.args))
    console.print(table)
    console.print(
        f"[dim]{stats.received} frames: {stats.handled} handled, "
        f"{stats.ignored} ignored, {stats.failed} undecodable[/dim]"
    )


@click.command("parse")
@click.argument("text")
def parse_cmd(text: str):
    """Show how chat TEXT would be parsed as a command."""
    cfg = _load_config()
    try:
        command = parse_command(text, cfg.prefix)
    except EmptyCommandError as e:
        console.print(f"[yellow]{e}[/yellow]")
        return
    if command is None:
        console.print(f"[dim]Not a command (no {cfg.prefix!r} prefix)[/dim]")
        return
    console.print(f"[green]verb[/green] {command.verb}")
    console.print(f"[green]args[/green] {command.args}")
