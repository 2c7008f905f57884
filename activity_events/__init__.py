"""activity_events: in-process activity event router.

Listeners subscribe by relationship perspective (who acted on whom,
relative to the observing character) and optionally by activity name.
Incoming host chat messages are parsed, classified and dispatched to
every matching listener, with one-shot listeners and failure isolation.
"""

from __future__ import annotations

__version__ = "0.1.0"
__description__ = "Perspective-filtered activity event router"

from activity_events.config import config
from activity_events.core.globals import globals_registry
from activity_events.core.perspective import classify
from activity_events.core.router import ActivityEventRouter
from activity_events.models import ActivityInfo, InvalidModeError, SubscriptionMode


def get_activity_events(version: str | None = None) -> ActivityEventRouter:
    """Return the process-wide router for *version* (default: this release).

    Routers for different versions are independent instances.
    """
    key = f"{config.registry_namespace}@{version or __version__}"
    return globals_registry.get(key, ActivityEventRouter)


__all__ = [
    "ActivityEventRouter",
    "ActivityInfo",
    "InvalidModeError",
    "SubscriptionMode",
    "classify",
    "get_activity_events",
    "__version__",
]
