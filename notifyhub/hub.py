"""NotificationHub — the owner-constructed entry point to notifyhub.

A hub bundles one SenderResolver, one SubscriberRegistry and the
Dispatcher over them.  Hubs share no state, so tests and applications can
build as many as they need.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from rich.console import Console

from notifyhub.dispatcher import Dispatcher
from notifyhub.models.channels import ChannelType, channel_tag
from notifyhub.models.dispatch import DispatchResult, ErrorKind
from notifyhub.senders import SenderFactory
from notifyhub.senders.console import BUILTIN_SENDERS, console_sender_factory
from notifyhub.senders.resolver import SenderResolver
from notifyhub.subscribers import Subscriber
from notifyhub.subscribers.registry import SubscriberRegistry

logger = logging.getLogger(__name__)


class NotificationHub:
    """Programmatic surface: register channels, subscribe, dispatch.

    Parameters
    ----------
    resolver:
        Sender registration table.  A fresh, empty one if not provided.
    registry:
        Subscriber registry.  A fresh, empty one if not provided.

    Examples
    --------
    >>> hub = NotificationHub.with_default_channels()
    >>> alice = UserSubscriber("Alice")
    >>> hub.subscribe("email", alice)
    >>> hub.dispatch("email", "Your order has been placed.").notified_count
    1
    """

    def __init__(
        self,
        resolver: SenderResolver | None = None,
        registry: SubscriberRegistry | None = None,
    ) -> None:
        self._resolver = resolver or SenderResolver()
        self._registry = registry or SubscriberRegistry()
        self._dispatcher = Dispatcher(self._resolver, self._registry)
        self._results: list[DispatchResult] = []

    @classmethod
    def with_default_channels(
        cls,
        console: Console | None = None,
        channels: Iterable[str] | None = None,
    ) -> NotificationHub:
        """Build a hub with the built-in console senders registered.

        *channels* restricts which of ``email``, ``sms`` and ``push`` are
        registered; all three by default.

        Raises
        ------
        ValueError
            If *channels* names a channel with no built-in sender.
        """
        hub = cls()
        for tag in channels if channels is not None else BUILTIN_SENDERS:
            sender_cls = BUILTIN_SENDERS.get(channel_tag(tag))
            if sender_cls is None:
                raise ValueError(f"No built-in sender for channel '{tag}'.")
            hub.register_channel(tag, console_sender_factory(sender_cls, console))
        return hub

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register_channel(
        self,
        channel_type: ChannelType | str,
        sender_factory: SenderFactory,
        *,
        replace: bool = False,
    ) -> None:
        """Make *channel_type* dispatchable through *sender_factory*."""
        self._resolver.register(channel_type, sender_factory, replace=replace)

    def subscribe(
        self, channel_type: ChannelType | str, subscriber: Subscriber
    ) -> None:
        """Register *subscriber* for *channel_type*.

        The hub keeps only a weak reference to *subscriber*.  An inline
        temporary such as ``hub.subscribe("email", UserSubscriber("x"))`` is
        collected at once and never notified; hold the subscriber in a
        variable for as long as it should receive messages.
        """
        self._registry.subscribe(channel_type, subscriber)

    @property
    def channels(self) -> list[str]:
        return self._resolver.channels

    @property
    def resolver(self) -> SenderResolver:
        return self._resolver

    @property
    def registry(self) -> SubscriberRegistry:
        return self._registry

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(
        self, channel_type: ChannelType | str, message: str
    ) -> DispatchResult:
        """Dispatch *message* on *channel_type*.  See ``Dispatcher.dispatch``."""
        result = self._dispatcher.dispatch(channel_type, message)
        self._results.append(result)
        return result

    def dispatch_batch(
        self, requests: Iterable[tuple[ChannelType | str, str]]
    ) -> list[DispatchResult]:
        """Dispatch ``(channel_type, message)`` pairs in order."""
        return [self.dispatch(channel_type, message) for channel_type, message in requests]

    def get_results(self) -> list[DispatchResult]:
        """Return every result produced by this hub, oldest first."""
        return list(self._results)

    def get_stats(self) -> dict[str, Any]:
        """Return dispatch statistics for this hub."""
        failures: dict[str, int] = {kind.value: 0 for kind in ErrorKind}
        by_channel: dict[str, int] = {}
        notified = 0
        for r in self._results:
            by_channel[r.channel_type] = by_channel.get(r.channel_type, 0) + 1
            notified += r.notified_count
            if r.error is not None:
                failures[r.error.value] += 1

        succeeded = sum(1 for r in self._results if r.ok)
        return {
            "total_dispatches": len(self._results),
            "succeeded": succeeded,
            "failed": len(self._results) - succeeded,
            "failures_by_kind": failures,
            "notifications_delivered": notified,
            "by_channel": by_channel,
            "channels": len(self._resolver.channels),
            "subscriptions": len(self._registry),
        }
