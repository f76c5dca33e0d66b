"""notifyhub data models — channel tags, error kinds, dispatch results."""

from notifyhub.models.channels import ChannelType, channel_tag
from notifyhub.models.dispatch import DispatchResult, ErrorKind

__all__ = [
    # channels
    "ChannelType",
    "channel_tag",
    # dispatch
    "DispatchResult",
    "ErrorKind",
]
