"""Shared test fixtures for notifyhub."""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest
from rich.console import Console

from notifyhub.hub import NotificationHub
from notifyhub.senders.resolver import SenderResolver
from notifyhub.subscribers.registry import SubscriberRegistry


class RecordingSubscriber:
    """Subscriber that records messages, optionally into a shared call log."""

    def __init__(self, name: str, call_log: list[tuple[str, str]] | None = None) -> None:
        self.name = name
        self.received: list[str] = []
        self._call_log = call_log

    def receive(self, message: str) -> None:
        self.received.append(message)
        if self._call_log is not None:
            self._call_log.append((self.name, message))

    def __repr__(self) -> str:
        return f"RecordingSubscriber({self.name!r})"


class RecordingSender:
    """Sender that records messages into a shared call log."""

    def __init__(self, call_log: list[tuple[str, str]]) -> None:
        self._call_log = call_log

    def send(self, message: str) -> None:
        self._call_log.append(("sender", message))


@pytest.fixture
def console_buffer() -> io.StringIO:
    """Provide the buffer behind the ``console`` fixture."""
    return io.StringIO()


@pytest.fixture
def console(console_buffer: io.StringIO) -> Console:
    """Provide a Rich Console that writes plain text into a buffer."""
    return Console(file=console_buffer, width=200, color_system=None)


@pytest.fixture
def resolver() -> SenderResolver:
    return SenderResolver()


@pytest.fixture
def registry() -> SubscriberRegistry:
    return SubscriberRegistry()


@pytest.fixture
def hub(console: Console) -> NotificationHub:
    """Provide a hub with the built-in email, sms and push channels."""
    return NotificationHub.with_default_channels(console=console)


@pytest.fixture
def call_log() -> list[tuple[str, str]]:
    return []


@pytest.fixture
def make_subscriber(
    call_log: list[tuple[str, str]],
) -> Callable[[str], RecordingSubscriber]:
    """Factory fixture: build a RecordingSubscriber sharing ``call_log``."""

    def _factory(name: str) -> RecordingSubscriber:
        return RecordingSubscriber(name, call_log)

    return _factory


@pytest.fixture
def sender_factory(
    call_log: list[tuple[str, str]],
) -> Callable[[], RecordingSender]:
    """Factory fixture: a sender factory whose senders share ``call_log``."""

    def _factory() -> RecordingSender:
        return RecordingSender(call_log)

    return _factory
