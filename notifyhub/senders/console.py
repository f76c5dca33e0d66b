"""Console senders — print each outgoing notification with Rich.

These are the built-in email, SMS and push channels.  They write a single
line per message, e.g. ``Sending Email: Your order has been placed.``
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.markup import escape

from notifyhub.senders import SenderFactory

logger = logging.getLogger(__name__)


class ConsoleSender:
    """Base class for senders that announce messages on a console.

    Parameters
    ----------
    console:
        Rich Console to print to.  A new one is created if not provided.
    """

    label = "Notification"

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def send(self, message: str) -> None:
        self.console.print(f"Sending {self.label}: {escape(message)}")
        logger.debug("%s sent %d chars", type(self).__name__, len(message))


class EmailSender(ConsoleSender):
    label = "Email"


class SMSSender(ConsoleSender):
    label = "SMS"


class PushSender(ConsoleSender):
    label = "Push Notification"


BUILTIN_SENDERS: dict[str, type[ConsoleSender]] = {
    "email": EmailSender,
    "sms": SMSSender,
    "push": PushSender,
}


def console_sender_factory(
    sender_cls: type[ConsoleSender], console: Console | None = None
) -> SenderFactory:
    """Return a zero-argument factory building *sender_cls* on *console*."""

    def _factory() -> ConsoleSender:
        return sender_cls(console)

    return _factory
