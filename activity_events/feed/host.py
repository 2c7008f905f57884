"""Host message handler chain.

Handlers run in ascending priority order.  A handler returning ``True``
consumes the message and stops the chain.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

MessageCallback = Callable[[Mapping[str, Any], Any], bool]


class ChatMessageHandler(BaseModel):
    """A callback registered with the host, ordered by ``priority``."""

    model_config = ConfigDict(frozen=True)

    description: str
    priority: int
    callback: MessageCallback


class MessageHandlerHost:
    """Runs incoming chat messages through the registered handlers."""

    def __init__(self) -> None:
        self._handlers: list[ChatMessageHandler] = []

    def register(self, handler: ChatMessageHandler) -> None:
        """Add *handler*; equal priorities keep registration order."""
        self._handlers.append(handler)
        self._handlers.sort(key=lambda h: h.priority)
        logger.info("Registered message handler: %s (priority %d)", handler.description, handler.priority)

    def unregister(self, handler: ChatMessageHandler) -> bool:
        for i, registered in enumerate(self._handlers):
            if registered is handler:
                del self._handlers[i]
                logger.info("Unregistered message handler: %s", handler.description)
                return True
        return False

    @property
    def handlers(self) -> list[ChatMessageHandler]:
        """Return a copy of the handler chain in run order."""
        return list(self._handlers)

    def process(self, message: Mapping[str, Any], sender: Any) -> bool:
        """Run *message* through the chain.  Returns ``True`` if consumed."""
        for handler in list(self._handlers):
            try:
                if handler.callback(message, sender):
                    logger.debug("Message consumed by %s", handler.description)
                    return True
            except Exception:
                logger.exception("Message handler %s failed", handler.description)
        return False
