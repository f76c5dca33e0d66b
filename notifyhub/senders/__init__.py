"""Sender protocol for notifyhub channels.

Every channel is backed by a sender factory: a zero-argument callable that
returns an object implementing the ``Sender`` protocol.  The dispatcher
builds a fresh sender per dispatch and calls ``send(message)`` once.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


class SendError(RuntimeError):
    """Raised by a sender when it could not deliver a message."""


@runtime_checkable
class Sender(Protocol):
    """Protocol that every notifyhub sender must implement.

    Senders perform the actual delivery side effect for one channel
    (writing to a console, handing off to a mail relay, ...).  They carry
    no identity between dispatches.
    """

    def send(self, message: str) -> None:
        """Deliver *message* through this channel.

        Implementations signal a failed delivery by raising ``SendError``.
        Any other exception is treated as a bug and propagates to the caller.
        """
        ...


SenderFactory = Callable[[], Sender]

__all__ = ["SendError", "Sender", "SenderFactory"]
