"""Channel type tags.

Channel types form an open set: any non-empty string names a channel.
``ChannelType`` lists the built-in tags for convenience.
"""

from __future__ import annotations

from enum import Enum


class ChannelType(str, Enum):
    """Built-in notification channels."""

    EMAIL = "email"
    SMS = "sms"
    PUSH = "push"


def channel_tag(channel_type: ChannelType | str) -> str:
    """Return the plain string tag for *channel_type*.

    Examples
    --------
    >>> channel_tag(ChannelType.SMS)
    'sms'
    >>> channel_tag("webhook")
    'webhook'
    """
    if isinstance(channel_type, Enum):
        return str(channel_type.value)
    return channel_type
