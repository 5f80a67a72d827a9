"""In-process store for tracked events and generated insights.

Nothing is persisted; a restart starts every user from scratch.
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict, deque

from goalcoach.backend.core.analytics.records import AnalyticsEvent, Insight

logger = logging.getLogger(__name__)

MAX_EVENTS_PER_USER = 10_000


class InsightStore:
    """Thread-safe per-user event log and latest insight batch."""

    def __init__(self, max_events: int = MAX_EVENTS_PER_USER):
        self._lock = threading.Lock()
        self._events: dict[str, deque[AnalyticsEvent]] = defaultdict(
            lambda: deque(maxlen=max_events)
        )
        self._insights: dict[str, list[Insight]] = {}

    def track(self, event: AnalyticsEvent) -> None:
        with self._lock:
            self._events[event.user_id].append(event)
        logger.debug("Tracked %s for user %s", event.event_type, event.user_id)

    def events(self, user_id: str) -> list[AnalyticsEvent]:
        with self._lock:
            return list(self._events.get(user_id, ()))

    def replace_insights(self, user_id: str, insights: list[Insight]) -> None:
        """Store a new batch; the previous batch is dropped."""
        with self._lock:
            self._insights[user_id] = list(insights)

    def insights(self, user_id: str, active_only: bool = True) -> list[Insight]:
        """Stored insights, highest confidence first."""
        with self._lock:
            stored = list(self._insights.get(user_id, ()))
        if active_only:
            stored = [i for i in stored if i.is_active]
        return sorted(stored, key=lambda i: i.confidence, reverse=True)
