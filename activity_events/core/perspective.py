"""Perspective classification and mode widening.

An activity is first placed in one of four perspective categories by
comparing its source and target against the observer.  The category is
then widened to every subscription mode that subsumes it, using the
static ``MODE_FILTERS`` table.
"""

from __future__ import annotations

from typing import Any

from activity_events.models.modes import PerspectiveCategory, SubscriptionMode

_M = SubscriptionMode

MODE_FILTERS: dict[PerspectiveCategory, frozenset[SubscriptionMode]] = {
    PerspectiveCategory.OTHERS_ON_SELF: frozenset(
        {_M.OTHERS_ON_SELF, _M.ANY_ON_SELF, _M.SELF_INVOLVED, _M.ANY_INVOLVED}
    ),
    PerspectiveCategory.SELF_ON_SELF: frozenset(
        {_M.SELF_ON_SELF, _M.ANY_ON_SELF, _M.SELF_INVOLVED, _M.ANY_INVOLVED}
    ),
    PerspectiveCategory.SELF_ON_OTHERS: frozenset(
        {_M.SELF_ON_OTHERS, _M.SELF_INVOLVED, _M.ANY_INVOLVED}
    ),
    PerspectiveCategory.OTHERS_ON_OTHERS: frozenset({_M.ANY_INVOLVED}),
}


def categorize(source_id: Any, target_id: Any, observer_id: Any) -> PerspectiveCategory:
    """Place an activity in its perspective category relative to *observer_id*."""
    if target_id == observer_id:
        if source_id == observer_id:
            return PerspectiveCategory.SELF_ON_SELF
        return PerspectiveCategory.OTHERS_ON_SELF
    if source_id == observer_id:
        return PerspectiveCategory.SELF_ON_OTHERS
    return PerspectiveCategory.OTHERS_ON_OTHERS


def classify(source_id: Any, target_id: Any, observer_id: Any) -> frozenset[SubscriptionMode]:
    """Return the set of subscription modes an activity must be delivered to.

    Examples
    --------
    >>> sorted(m.value for m in classify(1, 2, 3))
    ['AnyInvolved']
    >>> SubscriptionMode.ANY_ON_SELF in classify(2, 1, 1)
    True
    """
    return MODE_FILTERS[categorize(source_id, target_id, observer_id)]
