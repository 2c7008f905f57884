"""Activity event data models — pydantic v2, frozen."""

from activity_events.models.activity import ActivityInfo
from activity_events.models.listener import ListenerEntry
from activity_events.models.modes import (
    InvalidModeError,
    PerspectiveCategory,
    SubscriptionMode,
    coerce_mode,
)

__all__ = [
    # modes
    "InvalidModeError",
    "PerspectiveCategory",
    "SubscriptionMode",
    "coerce_mode",
    # registry
    "ListenerEntry",
    # payload
    "ActivityInfo",
]
