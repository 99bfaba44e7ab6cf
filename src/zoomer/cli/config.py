"""CLI: zoomer config show|set"""

import json

import click
from pydantic import ValidationError
from rich.console import Console

from zoomer import config as config_module
from zoomer.config import BotConfig, save_config

console = Console()


def _load_config() -> BotConfig:
    from zoomer.cli.main import _load_config
    return _load_config()


@click.group()
def config():
    """Bot configuration."""


@config.command("show")
@click.option("--json-output", "--json", is_flag=True)
def config_show(json_output: bool):
    """Show the effective configuration."""
    cfg = _load_config()
    if json_output:
        click.echo(json.dumps(cfg.model_dump(), indent=2))
        return
    for key, value in cfg.model_dump().items():
        console.print(f"[bold]{key}[/bold] = {value!r}")
    console.print(f"[dim]File: {config_module.CONFIG_FILE}[/dim]")


@config.command("set")
@click.argument("key")
@click.argument("value")
def config_set(key: str, value: str):
    """Set a configuration value and save it."""
    cfg = _load_config()
    if key not in BotConfig.model_fields:
        raise click.BadParameter(f"unknown key {key!r}", param_hint="KEY")
    try:
        updated = BotConfig.model_validate({**cfg.model_dump(), key: value})
    except ValidationError as e:
        raise click.BadParameter(str(e.errors()[0]["msg"]), param_hint="VALUE")
    save_config(updated)
    console.print(f"[green]{key} = {getattr(updated, key)!r}[/green]")
