"""SubscriberRegistry — per-channel ordered subscriber lists.

Registration order is notification order.  The same subscriber may join
several channels, or the same channel more than once; each registration
produces one notification per dispatch.  De-duplication, if wanted, is up
to the caller.

Handles are weak references.  A subscriber that has been garbage
collected is dropped the next time its channel is read.
"""

from __future__ import annotations

import logging
import threading
import weakref

from notifyhub.models.channels import ChannelType, channel_tag
from notifyhub.subscribers import Subscriber

logger = logging.getLogger(__name__)


class SubscriberRegistry:
    """Maps channel tags to ordered sequences of subscriber handles.

    A single lock guards the whole mapping, so a ``subscribe`` never
    interleaves with a ``subscribers_for`` snapshot.

    Usage
    -----
    >>> registry = SubscriberRegistry()
    >>> registry.subscribe("push", alice)
    >>> registry.subscribe("push", bob)
    >>> registry.subscribers_for("push") == (alice, bob)
    True
    >>> registry.subscribers_for("fax")
    ()
    """

    def __init__(self) -> None:
        self._handles: dict[str, list[weakref.ref[Subscriber]]] = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def subscribe(
        self, channel_type: ChannelType | str, subscriber: Subscriber
    ) -> None:
        """Append *subscriber* to the channel's notification list.

        Raises
        ------
        ValueError
            If the channel tag is empty.
        TypeError
            If *subscriber* has no ``receive`` method, or cannot be weakly
            referenced (e.g. a ``__slots__`` class without ``__weakref__``).
        """
        if not isinstance(subscriber, Subscriber):
            raise TypeError(
                f"{type(subscriber).__name__} does not implement receive(message)"
            )
        tag = channel_tag(channel_type)
        if not tag:
            raise ValueError("Channel type must be a non-empty string.")
        handle = weakref.ref(subscriber)
        with self._lock:
            self._handles.setdefault(tag, []).append(handle)
        logger.info("Subscribed %r to channel %s", subscriber, tag)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def subscribers_for(
        self, channel_type: ChannelType | str
    ) -> tuple[Subscriber, ...]:
        """Return the live subscribers of a channel, in registration order.

        Unknown channels yield an empty tuple.
        """
        tag = channel_tag(channel_type)
        with self._lock:
            handles = self._handles.get(tag)
            if not handles:
                return ()
            live: list[Subscriber] = []
            alive_handles: list[weakref.ref[Subscriber]] = []
            for handle in handles:
                subscriber = handle()
                if subscriber is not None:
                    live.append(subscriber)
                    alive_handles.append(handle)
            if len(alive_handles) != len(handles):
                logger.warning(
                    "Pruned %d collected subscriber(s) from channel %s; "
                    "keep a reference to each subscriber while it is registered",
                    len(handles) - len(alive_handles),
                    tag,
                )
                self._handles[tag] = alive_handles
            return tuple(live)

    @property
    def channel_types(self) -> list[str]:
        """Channels that have had at least one registration."""
        with self._lock:
            return list(self._handles)

    def __len__(self) -> int:
        """Total number of live registrations across all channels."""
        with self._lock:
            return sum(
                1
                for handles in self._handles.values()
                for handle in handles
                if handle() is not None
            )
