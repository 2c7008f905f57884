"""Feed: turns host chat messages into router dispatches."""

from activity_events.feed.handler import attach_router, make_message_handler
from activity_events.feed.host import ChatMessageHandler, MessageHandlerHost
from activity_events.feed.parser import parse_activity_info

__all__ = [
    "ChatMessageHandler",
    "MessageHandlerHost",
    "attach_router",
    "make_message_handler",
    "parse_activity_info",
]
