"""``notifyhub send`` — dispatch one notification on a configured channel."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.markup import escape

from notifyhub.config import config
from notifyhub.hub import NotificationHub

console = Console()


def send_cmd(
    channel: str = typer.Argument(..., help="Channel type, e.g. email, sms, push."),
    message: str = typer.Argument(..., help="Message text to send."),
) -> None:
    """Send MESSAGE on CHANNEL using the built-in senders.

    Exits with code 1 if the channel is unknown, the send fails, or the
    configured default channels name a channel with no built-in sender.
    """
    try:
        hub = NotificationHub.with_default_channels(
            console=console, channels=config.default_channels
        )
    except ValueError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    result = hub.dispatch(channel, message)

    if not result.ok:
        console.print(f"[bold red]Error:[/bold red] {escape(result.detail or '')}")
        raise typer.Exit(code=1)

    console.print(
        f"[green]Dispatched[/green] via {result.sender} "
        f"({result.notified_count} subscriber(s) notified)"
    )
