"""ActivityEventRouter — in-process publish/subscribe for activity events.

Listeners subscribe against a ``SubscriptionMode`` and, optionally, a
specific activity name.  The feed classifies each incoming activity into
a set of modes (see ``activity_events.core.perspective``) and calls
``dispatch``; every entry whose mode is in that set and whose activity
filter matches is invoked, in registration order.

Listener failures are logged and never escape ``dispatch``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Set
from typing import Any

from activity_events.models.listener import ListenerEntry
from activity_events.models.modes import SubscriptionMode, coerce_mode

logger = logging.getLogger(__name__)

Listener = Callable[..., Any]


class ActivityEventRouter:
    """Routes activity events to subscribed listeners.

    Dispatch walks a snapshot of the registry, so listeners may subscribe
    and unsubscribe while an event is being delivered:

    * entries subscribed during a cycle do not receive the current event;
    * entries unsubscribed during a cycle still fire for the current
      event if they were in the snapshot, and are gone afterwards;
    * ``once`` entries are removed when the cycle that fired them ends.

    Usage
    -----
    >>> router = ActivityEventRouter()
    >>> seen = []
    >>> router.on_any(SubscriptionMode.ANY_INVOLVED, lambda *args: seen.append(args))
    >>> router.dispatch({SubscriptionMode.ANY_INVOLVED}, "Kiss", 1, 2)
    >>> seen
    [(1, 2)]
    """

    def __init__(self) -> None:
        self._entries: list[ListenerEntry] = []
        # once entries already fired by an in-progress (possibly nested) dispatch
        self._spent: dict[int, ListenerEntry] = {}
        self._depth = 0

    # ------------------------------------------------------------------
    # Subscription
    # ------------------------------------------------------------------

    def subscribe(
        self,
        mode: SubscriptionMode | str,
        activity: str | None,
        listener: Listener,
        once: bool = False,
    ) -> ListenerEntry:
        """Append a listener entry and return it.

        No deduplication: registering the same listener twice makes it
        fire twice.

        Raises
        ------
        InvalidModeError
            If *mode* is not a ``SubscriptionMode``.
        TypeError
            If *listener* is not callable.
        """
        resolved = coerce_mode(mode)
        if not callable(listener):
            raise TypeError(f"Listener must be callable, got {type(listener).__name__}")

        entry = ListenerEntry(mode=resolved, activity=activity, listener=listener, once=once)
        self._entries.append(entry)
        logger.debug(
            "Subscribed %r to %s (%s)%s",
            listener,
            activity or "*",
            resolved.value,
            " once" if once else "",
        )
        return entry

    def unsubscribe_all(self, mode: SubscriptionMode | str, activity: str | None) -> int:
        """Remove every entry registered for exactly ``(mode, activity)``.

        ``activity=None`` targets the match-any entries of *mode*, not all
        entries of *mode*.  Returns the number of entries removed.
        """
        resolved = coerce_mode(mode)
        return self._remove(lambda e: e.mode is resolved and e.activity == activity)

    def unsubscribe_one(
        self,
        mode: SubscriptionMode | str,
        activity: str | None,
        listener: Listener,
    ) -> int:
        """Remove the entries for ``(mode, activity)`` that hold *listener*."""
        resolved = coerce_mode(mode)
        return self._remove(
            lambda e: e.mode is resolved and e.activity == activity and e.listener == listener
        )

    def _remove(self, predicate: Callable[[ListenerEntry], bool]) -> int:
        kept = [e for e in self._entries if not predicate(e)]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        if removed:
            logger.debug("Unsubscribed %d listener(s)", removed)
        return removed

    # -- Convenience shapes ---------------------------------------------

    def on(self, mode: SubscriptionMode | str, activity: str, listener: Listener) -> None:
        """Listen to *activity* under *mode* until removed."""
        self.subscribe(mode, activity, listener)

    def once(self, mode: SubscriptionMode | str, activity: str, listener: Listener) -> None:
        """Listen to the next *activity* under *mode*, then stop."""
        self.subscribe(mode, activity, listener, once=True)

    def on_any(self, mode: SubscriptionMode | str, listener: Listener) -> None:
        """Listen to every activity under *mode* until removed."""
        self.subscribe(mode, None, listener)

    def once_any(self, mode: SubscriptionMode | str, listener: Listener) -> None:
        """Listen to the next activity of any name under *mode*, then stop."""
        self.subscribe(mode, None, listener, once=True)

    def off(
        self,
        mode: SubscriptionMode | str,
        activity: str | None,
        listener: Listener | None = None,
    ) -> None:
        """Remove listeners for ``(mode, activity)``.

        Without *listener*, every entry for the pair is removed.  Pass
        ``activity=None`` to target the entries not tied to an activity.
        """
        if listener is None:
            self.unsubscribe_all(mode, activity)
        else:
            self.unsubscribe_one(mode, activity, listener)

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def dispatch(
        self,
        mode_set: Set[SubscriptionMode],
        activity_name: str,
        *payload: Any,
    ) -> None:
        """Deliver one activity to every matching listener.

        Parameters
        ----------
        mode_set:
            The widened modes of the activity, as produced by
            ``classify``.
        activity_name:
            The activity being reported.  Entries with a ``None`` filter
            match any name.
        payload:
            Forwarded positionally to each listener.  By convention the
            acting character, the observer and the ``ActivityInfo``.
        """
        snapshot = list(self._entries)
        next_entries: list[ListenerEntry] = []
        delivered = 0

        self._depth += 1
        try:
            for entry in snapshot:
                if not entry.matches(mode_set, activity_name):
                    next_entries.append(entry)
                    continue

                if entry.once:
                    if id(entry) in self._spent:
                        continue
                    self._spent[id(entry)] = entry

                try:
                    entry.listener(*payload)
                    delivered += 1
                except Exception:
                    logger.exception(
                        "Error in activity event listener for %s (%s)",
                        entry.activity,
                        entry.mode.value,
                    )

                if not entry.once:
                    next_entries.append(entry)

            self._entries = self._reconcile(snapshot, next_entries)
        finally:
            self._depth -= 1
            if self._depth == 0:
                self._spent.clear()

        logger.debug(
            "Dispatched %s to %d listener(s) (%d registered)",
            activity_name,
            delivered,
            len(self._entries),
        )

    def _reconcile(
        self,
        snapshot: list[ListenerEntry],
        next_entries: list[ListenerEntry],
    ) -> list[ListenerEntry]:
        """Merge the rebuilt registry with mutations made during the cycle.

        Kept snapshot entries survive only if still live; entries added
        during the cycle follow them in registration order.
        """
        live = set(self._entries)
        seen = set(snapshot)
        kept = [e for e in next_entries if e in live]
        added = [e for e in self._entries if e not in seen]
        return kept + added

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def listeners(self) -> list[ListenerEntry]:
        """Return a copy of the registry in registration order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ActivityEventRouter(listeners={len(self._entries)})"
