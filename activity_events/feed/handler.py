"""Activity message handler — feeds parsed host messages into a router."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from activity_events import __version__
from activity_events.config import config
from activity_events.core.perspective import classify
from activity_events.core.router import ActivityEventRouter
from activity_events.feed.host import ChatMessageHandler, MessageHandlerHost
from activity_events.feed.parser import parse_activity_info


def make_message_handler(
    router: ActivityEventRouter,
    observer_id: Any,
    *,
    priority: int | None = None,
    description: str | None = None,
) -> ChatMessageHandler:
    """Build a host handler that dispatches activities seen by *observer_id*.

    Listeners receive ``(sender_id, observer_id, info)``.  The handler
    never consumes the message, so later handlers still see it.
    """

    def _callback(message: Mapping[str, Any], sender_id: Any) -> bool:
        info = parse_activity_info(message, sender_id)
        if info is None:
            return False
        modes = classify(info.source_character, info.target_character, observer_id)
        router.dispatch(modes, info.activity_name, sender_id, observer_id, info)
        return False

    return ChatMessageHandler(
        description=description or f"{config.handler_description} v{__version__}",
        priority=config.handler_priority if priority is None else priority,
        callback=_callback,
    )


def attach_router(
    host: MessageHandlerHost,
    router: ActivityEventRouter,
    observer_id: Any,
    **kwargs: Any,
) -> ChatMessageHandler:
    """Register a handler for *router* with *host* and return it."""
    handler = make_message_handler(router, observer_id, **kwargs)
    host.register(handler)
    return handler
