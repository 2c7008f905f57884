"""Core routing: perspective classification, the router, the keyed registry."""

from activity_events.core.globals import GlobalRegistry, globals_registry
from activity_events.core.perspective import MODE_FILTERS, categorize, classify
from activity_events.core.router import ActivityEventRouter

__all__ = [
    "ActivityEventRouter",
    "GlobalRegistry",
    "MODE_FILTERS",
    "categorize",
    "classify",
    "globals_registry",
]
