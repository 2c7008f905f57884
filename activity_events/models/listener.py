"""Listener registry entries."""

from __future__ import annotations

from collections.abc import Callable, Set
from typing import Any

from pydantic import BaseModel, ConfigDict

from activity_events.models.modes import SubscriptionMode


class ListenerEntry(BaseModel):
    """One subscription held by the router.

    ``activity=None`` matches every activity name.  Entries are tracked by
    identity, so two registrations of the same listener stay distinct.
    """

    model_config = ConfigDict(frozen=True)

    mode: SubscriptionMode
    activity: str | None = None
    listener: Callable[..., Any]
    once: bool = False

    def matches(self, mode_set: Set[SubscriptionMode], activity_name: str) -> bool:
        """Whether a dispatch for *mode_set* / *activity_name* reaches this entry."""
        if self.mode not in mode_set:
            return False
        return self.activity is None or self.activity == activity_name

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)
