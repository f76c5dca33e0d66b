"""notifyhub: in-process notification dispatch hub.

Resolves a channel-specific sender for each request (email, SMS, push, or
any registered channel), sends the message, then fans it out to the
channel's subscribers in registration order.
"""

__version__ = "0.1.0"
__description__ = "Synchronous in-memory notification dispatch and fan-out"

from notifyhub.dispatcher import Dispatcher
from notifyhub.hub import NotificationHub
from notifyhub.models import ChannelType, DispatchResult, ErrorKind
from notifyhub.senders import Sender, SendError
from notifyhub.subscribers import Subscriber

__all__ = [
    "ChannelType",
    "DispatchResult",
    "Dispatcher",
    "ErrorKind",
    "NotificationHub",
    "SendError",
    "Sender",
    "Subscriber",
    "__version__",
]
