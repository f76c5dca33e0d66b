"""Main Typer application — registers all CLI commands.

Entry point: ``notifyhub`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from notifyhub.cli.commands.channels import channels_cmd
from notifyhub.cli.commands.demo import demo_cmd
from notifyhub.cli.commands.send import send_cmd
from notifyhub.config import config

app = typer.Typer(
    name="notifyhub",
    help="notifyhub: synchronous notification dispatch and fan-out.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log at DEBUG level."
    ),
) -> None:
    """Configure logging before any command runs."""
    level = "DEBUG" if verbose else config.effective_log_level
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


app.command(name="demo", help="Run the order-notification demo.")(demo_cmd)
app.command(name="send", help="Dispatch one notification.")(send_cmd)
app.command(name="channels", help="List the built-in channels.")(channels_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
