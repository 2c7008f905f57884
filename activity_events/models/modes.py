"""Perspective categories and subscription modes.

A perspective category describes who acted on whom relative to the
observing actor.  A subscription mode is the granularity a listener
registers interest at; broader modes subsume several categories.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class InvalidModeError(ValueError):
    """Raised when a value is not one of the six subscription modes."""


class PerspectiveCategory(str, Enum):
    """Who performed an activity, relative to the observer."""

    SELF_ON_SELF = "SelfOnSelf"
    OTHERS_ON_SELF = "OthersOnSelf"
    SELF_ON_OTHERS = "SelfOnOthers"
    OTHERS_ON_OTHERS = "OthersOnOthers"


class SubscriptionMode(str, Enum):
    """The closed set of modes a listener can subscribe to."""

    SELF_ON_SELF = "SelfOnSelf"
    OTHERS_ON_SELF = "OthersOnSelf"
    SELF_ON_OTHERS = "SelfOnOthers"
    ANY_ON_SELF = "AnyOnSelf"  # observer is the target, any actor
    SELF_INVOLVED = "SelfInvolved"  # observer is either actor
    ANY_INVOLVED = "AnyInvolved"  # every activity


def coerce_mode(value: Any) -> SubscriptionMode:
    """Return *value* as a ``SubscriptionMode``.

    Accepts a member or its string value.

    Raises
    ------
    InvalidModeError
        If *value* names no subscription mode.
    """
    if isinstance(value, SubscriptionMode):
        return value
    try:
        return SubscriptionMode(value)
    except ValueError as exc:
        valid = ", ".join(m.value for m in SubscriptionMode)
        raise InvalidModeError(
            f"Unknown subscription mode: {value!r} (expected one of: {valid})"
        ) from exc
