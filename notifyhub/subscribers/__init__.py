"""Subscriber protocol for notifyhub fan-out.

A subscriber is any object with a ``receive(message)`` method.  The hub
never owns subscribers: it holds weak references, so keeping a subscriber
alive for as long as it should be notified is the caller's job.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Subscriber(Protocol):
    """Protocol that every notifyhub subscriber must implement."""

    def receive(self, message: str) -> None:
        """Handle a message dispatched on a channel this subscriber joined."""
        ...


__all__ = ["Subscriber"]
