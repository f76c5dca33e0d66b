"""``notifyhub demo`` — the order-notification walkthrough.

Registers the email, SMS and push channels, subscribes Alice to email and
push and Bob to SMS and push, then sends three order updates.
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from notifyhub.hub import NotificationHub
from notifyhub.models.channels import ChannelType
from notifyhub.subscribers.user import UserSubscriber

console = Console()

DEMO_MESSAGES: list[tuple[ChannelType, str]] = [
    (ChannelType.EMAIL, "Your order has been placed."),
    (ChannelType.SMS, "Your order is on the way."),
    (ChannelType.PUSH, "Your order has been delivered."),
]


def demo_cmd() -> None:
    """Run the order-notification demo on a fresh hub."""
    hub = NotificationHub.with_default_channels(console=console)

    alice = UserSubscriber("Alice", console=console)
    bob = UserSubscriber("Bob", console=console)

    hub.subscribe(ChannelType.EMAIL, alice)
    hub.subscribe(ChannelType.SMS, bob)
    hub.subscribe(ChannelType.PUSH, alice)
    hub.subscribe(ChannelType.PUSH, bob)

    console.print()
    console.print(
        Panel(
            "[bold]notifyhub Demo[/bold]\n\n"
            "Alice: email, push\n"
            "Bob:   sms, push",
            border_style="cyan",
            padding=(1, 2),
        )
    )
    console.print()

    results = hub.dispatch_batch(DEMO_MESSAGES)

    table = Table(title="Dispatch Summary")
    table.add_column("Channel", style="cyan")
    table.add_column("Sender")
    table.add_column("Notified", justify="right")
    table.add_column("Status", justify="center")
    for result in results:
        status = "[green]OK[/green]" if result.ok else f"[red]{result.error.value}[/red]"
        table.add_row(
            result.channel_type,
            result.sender or "-",
            str(result.notified_count),
            status,
        )

    console.print()
    console.print(table)
