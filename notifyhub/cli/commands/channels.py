"""``notifyhub channels`` — list the channels the CLI hub registers."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from notifyhub.config import config
from notifyhub.senders.console import BUILTIN_SENDERS

console = Console()


def channels_cmd() -> None:
    """List configured built-in channels and their senders."""
    table = Table(title="Channels")
    table.add_column("Channel", style="cyan")
    table.add_column("Sender", style="green")
    table.add_column("Label")

    for tag in config.default_channels:
        sender_cls = BUILTIN_SENDERS.get(tag)
        if sender_cls is None:
            table.add_row(tag, "[red]unknown[/red]", "-")
            continue
        table.add_row(tag, sender_cls.__name__, sender_cls.label)

    console.print(table)
