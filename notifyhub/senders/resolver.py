"""SenderResolver — maps channel tags to sender factories.

The set of channels is open: adding ``"slack"`` or ``"webhook"`` is a
``register`` call, never an edit to the resolver.
"""

from __future__ import annotations

import logging

from notifyhub.models.channels import ChannelType, channel_tag
from notifyhub.senders import Sender, SenderFactory

logger = logging.getLogger(__name__)


class SenderResolver:
    """Registration table from channel tag to sender factory.

    Usage
    -----
    >>> resolver = SenderResolver()
    >>> resolver.register("email", EmailSender)
    >>> isinstance(resolver.resolve("email"), EmailSender)
    True
    >>> resolver.resolve("fax") is None
    True
    """

    def __init__(self) -> None:
        self._factories: dict[str, SenderFactory] = {}

    def register(
        self,
        channel_type: ChannelType | str,
        factory: SenderFactory,
        *,
        replace: bool = False,
    ) -> None:
        """Register *factory* as the sender constructor for *channel_type*.

        Raises
        ------
        ValueError
            If the tag is empty, or already registered and *replace* is
            ``False``.
        TypeError
            If *factory* is not callable.
        """
        tag = channel_tag(channel_type)
        if not tag:
            raise ValueError("Channel type must be a non-empty string.")
        if not callable(factory):
            raise TypeError(f"Sender factory for '{tag}' is not callable.")
        if tag in self._factories and not replace:
            raise ValueError(
                f"Channel '{tag}' is already registered.  "
                "Pass replace=True to override it."
            )
        self._factories[tag] = factory
        logger.info("Registered channel: %s", tag)

    def resolve(self, channel_type: ChannelType | str) -> Sender | None:
        """Build a sender for *channel_type*, or return ``None`` if unknown."""
        factory = self._factories.get(channel_tag(channel_type))
        if factory is None:
            return None
        return factory()

    def is_registered(self, channel_type: ChannelType | str) -> bool:
        return channel_tag(channel_type) in self._factories

    @property
    def channels(self) -> list[str]:
        """Registered tags in registration order."""
        return list(self._factories)
