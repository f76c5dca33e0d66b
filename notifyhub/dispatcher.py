"""Dispatcher — runs one notification request end-to-end.

resolve sender -> send -> fan out to the channel's subscribers.

Subscribers are notified only after a successful send, strictly in
registration order, before ``dispatch`` returns.  An unknown channel or a
failed send is reported in the ``DispatchResult``; no subscriber is
notified in either case.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from notifyhub.models.channels import ChannelType, channel_tag
from notifyhub.models.dispatch import DispatchResult
from notifyhub.senders import SendError
from notifyhub.senders.resolver import SenderResolver
from notifyhub.subscribers.registry import SubscriberRegistry

logger = logging.getLogger(__name__)


class Dispatcher:
    """Ties a SenderResolver and a SubscriberRegistry together.

    Usage
    -----
    >>> dispatcher = Dispatcher(resolver, registry)
    >>> result = dispatcher.dispatch("email", "Your order has been placed.")
    >>> result.ok, result.notified_count
    (True, 1)
    """

    def __init__(
        self, resolver: SenderResolver, registry: SubscriberRegistry
    ) -> None:
        self._resolver = resolver
        self._registry = registry

    def dispatch(
        self, channel_type: ChannelType | str, message: str
    ) -> DispatchResult:
        """Send *message* on *channel_type* and notify its subscribers.

        Raises
        ------
        Exception
            Whatever a sender raises other than ``SendError``, or whatever
            a subscriber raises.  Only ``SendError`` is turned into a
            ``SEND_FAILED`` result.
        """
        tag = channel_tag(channel_type)

        sender = self._resolver.resolve(tag)
        if sender is None:
            logger.warning("Invalid notification type: %s", tag)
            return DispatchResult.channel_not_found(tag)

        sender_name = type(sender).__name__
        try:
            sender.send(message)
        except SendError as exc:
            logger.error("Sender %s failed on channel %s: %s", sender_name, tag, exc)
            return DispatchResult.send_failed(tag, sender_name, str(exc))

        subscribers = self._registry.subscribers_for(tag)
        for subscriber in subscribers:
            subscriber.receive(message)
            logger.debug("Delivered %s message to %r", tag, subscriber)

        return DispatchResult(
            ok=True,
            channel_type=tag,
            notified_count=len(subscribers),
            sender=sender_name,
        )

    def dispatch_batch(
        self, requests: Iterable[tuple[ChannelType | str, str]]
    ) -> list[DispatchResult]:
        """Dispatch ``(channel_type, message)`` pairs in order."""
        return [self.dispatch(channel_type, message) for channel_type, message in requests]
