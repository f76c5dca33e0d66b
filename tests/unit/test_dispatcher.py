"""Unit tests for Dispatcher — resolve, send, then ordered fan-out."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from notifyhub.dispatcher import Dispatcher
from notifyhub.models.dispatch import ErrorKind
from notifyhub.senders import Sender, SendError
from notifyhub.senders.resolver import SenderResolver
from notifyhub.subscribers.registry import SubscriberRegistry


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _FailingSender:
    """A sender whose transport always fails."""

    def send(self, message: str) -> None:
        raise SendError("relay unreachable")


class _BrokenSender:
    """A sender with a bug."""

    def send(self, message: str) -> None:
        raise ZeroDivisionError("bug")


@pytest.fixture
def dispatcher(
    resolver: SenderResolver,
    registry: SubscriberRegistry,
    sender_factory: Callable[[], Sender],
) -> Dispatcher:
    resolver.register("email", sender_factory)
    resolver.register("push", sender_factory)
    return Dispatcher(resolver, registry)


# ---------------------------------------------------------------------------
# Test: Dispatcher
# ---------------------------------------------------------------------------


class TestDispatcher:
    def test_fan_out_in_registration_order(self, dispatcher, registry, make_subscriber, call_log):
        """Subscribers are notified exactly in registration order."""
        names = ["s1", "s2", "s3", "s4"]
        subs = [make_subscriber(n) for n in names]
        for sub in subs:
            registry.subscribe("push", sub)

        result = dispatcher.dispatch("push", "m")

        assert result.ok is True
        assert result.notified_count == 4
        assert [name for name, _ in call_log[1:]] == names

    def test_sender_runs_before_subscribers(self, dispatcher, registry, make_subscriber, call_log):
        alice = make_subscriber("alice")
        registry.subscribe("email", alice)

        dispatcher.dispatch("email", "hello")

        assert call_log == [("sender", "hello"), ("alice", "hello")]

    def test_channel_isolation(self, dispatcher, registry, make_subscriber):
        alice = make_subscriber("alice")
        registry.subscribe("email", alice)

        result = dispatcher.dispatch("push", "not for alice")

        assert result.ok is True
        assert result.notified_count == 0
        assert alice.received == []

    def test_unknown_channel_notifies_nobody(self, dispatcher, registry, make_subscriber, call_log):
        """Subscriptions alone do not make a channel dispatchable."""
        alice = make_subscriber("alice")
        registry.subscribe("carrier-pigeon", alice)

        result = dispatcher.dispatch("carrier-pigeon", "coo")

        assert result.ok is False
        assert result.error is ErrorKind.CHANNEL_NOT_FOUND
        assert result.notified_count == 0
        assert result.detail == "Invalid notification type: carrier-pigeon"
        assert alice.received == []
        assert call_log == []

    def test_unknown_channel_logs_warning(self, dispatcher, caplog):
        with caplog.at_level(logging.WARNING, logger="notifyhub.dispatcher"):
            dispatcher.dispatch("fax", "m")
        assert "Invalid notification type: fax" in caplog.text

    def test_duplicate_subscription_notified_twice(self, dispatcher, registry, make_subscriber):
        alice = make_subscriber("alice")
        registry.subscribe("email", alice)
        registry.subscribe("email", alice)

        result = dispatcher.dispatch("email", "twice")

        assert result.notified_count == 2
        assert alice.received == ["twice", "twice"]

    def test_send_failure_suppresses_fan_out(self, resolver, registry, make_subscriber):
        resolver.register("sms", _FailingSender)
        alice = make_subscriber("alice")
        registry.subscribe("sms", alice)

        result = Dispatcher(resolver, registry).dispatch("sms", "m")

        assert result.ok is False
        assert result.error is ErrorKind.SEND_FAILED
        assert result.sender == "_FailingSender"
        assert "relay unreachable" in result.detail
        assert result.notified_count == 0
        assert alice.received == []

    def test_unexpected_sender_error_propagates(self, resolver, registry):
        resolver.register("sms", _BrokenSender)
        with pytest.raises(ZeroDivisionError):
            Dispatcher(resolver, registry).dispatch("sms", "m")

    def test_result_names_sender(self, dispatcher):
        result = dispatcher.dispatch("email", "m")
        assert result.sender == "RecordingSender"
        assert result.channel_type == "email"
        assert result.error is None

    def test_dispatch_batch(self, dispatcher, registry, make_subscriber):
        alice = make_subscriber("alice")
        registry.subscribe("email", alice)

        results = dispatcher.dispatch_batch(
            [("email", "one"), ("fax", "two"), ("email", "three")]
        )

        assert [r.ok for r in results] == [True, False, True]
        assert alice.received == ["one", "three"]
