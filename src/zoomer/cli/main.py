"""
Zoomer CLI — `zoomer` command.

Commands:
  zoomer replay <file>        Feed recorded frames through the bot (dry run)
  zoomer parse <text>         Show how a chat message parses as a command
  zoomer config show|set      Inspect or change ~/.zoomer/config.json
"""

import logging

try:
    import click
    from rich.console import Console
    from rich.logging import RichHandler
except ImportError:
    raise SystemExit("CLI requires extras: pip install zoomer-bot[cli]")

from zoomer import __version__
from zoomer.config import BotConfig, load_config
from zoomer.errors import ConfigError

console = Console()
err_console = Console(stderr=True)


def _load_config() -> BotConfig:
    try:
        return load_config()
    except ConfigError as e:
        err_console.print(f"[red]{e}[/red]")
        raise SystemExit(1)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@click.group()
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def main(verbose: bool):
    """Zoomer — a meeting bot that welcomes people and takes ++commands."""
    _setup_logging("DEBUG" if verbose else _load_config().log_level)


# Register subcommands from separate modules
from zoomer.cli.config import config
from zoomer.cli.replay import parse_cmd, replay_cmd

main.add_command(config)
main.add_command(parse_cmd)
main.add_command(replay_cmd)


if __name__ == "__main__":
    main()
