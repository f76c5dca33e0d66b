"""A named user that prints the notifications it receives."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class UserSubscriber:
    """Subscriber representing a person.

    Each received message is printed as
    ``<name> received notification: <message>`` and kept in ``inbox``.
    """

    def __init__(self, name: str, console: Console | None = None) -> None:
        self.name = name
        self.console = console or Console()
        self.inbox: list[str] = []

    def receive(self, message: str) -> None:
        self.inbox.append(message)
        self.console.print(
            f"{escape(self.name)} received notification: {escape(message)}"
        )

    def __repr__(self) -> str:
        return f"UserSubscriber({self.name!r})"
