"""Shared test fixtures for activity_events."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from activity_events.core.globals import globals_registry
from activity_events.core.router import ActivityEventRouter
from activity_events.feed.host import MessageHandlerHost

OBSERVER = 1001
OTHER = 2002
THIRD = 3003


@pytest.fixture
def router() -> ActivityEventRouter:
    """Provide a fresh, empty router."""
    return ActivityEventRouter()


@pytest.fixture
def host() -> MessageHandlerHost:
    """Provide an empty host handler chain."""
    return MessageHandlerHost()


@pytest.fixture
def calls() -> list[tuple[str, tuple[Any, ...]]]:
    """Shared call log for recording listeners."""
    return []


@pytest.fixture
def recorder(calls: list[tuple[str, tuple[Any, ...]]]) -> Callable[[str], Callable[..., None]]:
    """Factory fixture: build a listener that logs ``(name, args)`` to ``calls``."""

    def _factory(name: str) -> Callable[..., None]:
        def _listener(*args: Any) -> None:
            calls.append((name, args))

        return _listener

    return _factory


@pytest.fixture(autouse=True)
def _clean_globals():
    """Keep the process-wide registry isolated between tests."""
    globals_registry.clear()
    yield
    globals_registry.clear()


# ---------------------------------------------------------------------------
# Message factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_activity_message() -> Callable[..., dict[str, Any]]:
    """Factory fixture: build a host activity chat message."""

    def _factory(
        activity: str = "Kiss",
        source: Any = OTHER,
        target: Any = OBSERVER,
        group: str = "ItemMouth",
        **overrides: Any,
    ) -> dict[str, Any]:
        message: dict[str, Any] = {
            "Type": "Activity",
            "Content": f"ChatOther-{group}-{activity}",
            "Dictionary": [
                {"SourceCharacter": source},
                {"TargetCharacter": target},
                {"Tag": "FocusAssetGroup", "FocusGroupName": group},
                {"ActivityName": activity},
            ],
        }
        message.update(overrides)
        return message

    return _factory
