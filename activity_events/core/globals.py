"""Process-wide keyed registry — one shared instance per key.

Repeated ``get`` calls with the same key return the instance created by
the first call's factory.  Callers version their keys (for example
``"ActivityEvents@0.1.0"``) so that independent releases loaded into the
same process do not share state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class GlobalRegistry:
    """Singleton-per-key instance store."""

    def __init__(self) -> None:
        self._instances: dict[str, Any] = {}

    def get(self, key: str, factory: Callable[[], T]) -> T:
        """Return the instance stored under *key*, creating it on first use."""
        if key not in self._instances:
            self._instances[key] = factory()
            logger.debug("Created global instance for %s", key)
        return self._instances[key]

    def has(self, key: str) -> bool:
        return key in self._instances

    def remove(self, key: str) -> bool:
        """Drop the instance under *key*.  Returns ``False`` if absent."""
        return self._instances.pop(key, None) is not None

    def clear(self) -> None:
        self._instances.clear()

    def __len__(self) -> int:
        return len(self._instances)


# Module-level singleton — import as `from activity_events.core.globals import globals_registry`
globals_registry = GlobalRegistry()
