"""Insight service – event tracking and insight generation.

Converts request payloads into the analytics records, runs the
:class:`~goalcoach.backend.core.analytics.InsightEngine` and keeps the
results in the process-wide :class:`InsightStore`.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from goalcoach.backend.core.analytics import (
    AnalyticsEvent,
    GoalRecord,
    HabitEntryRecord,
    HabitRecord,
    Insight,
    InsightEngine,
    InsightStore,
    ProgressRecord,
    TaskRecord,
    UserActivity,
    recommendations_from,
)
from goalcoach.backend.schemas import (
    GenerateInsightsIn,
    InsightOut,
    RecommendationsOut,
    TrackEventIn,
)

logger = logging.getLogger(__name__)


def _build_activity(payload: GenerateInsightsIn) -> UserActivity:
    """Convert the Pydantic snapshot into the records the engine expects."""
    return UserActivity(
        goals=[GoalRecord(**g.model_dump()) for g in payload.goals],
        tasks=[TaskRecord(**t.model_dump()) for t in payload.tasks],
        progress_entries=[ProgressRecord(**p.model_dump()) for p in payload.progress_entries],
        habits=[HabitRecord(**h.model_dump()) for h in payload.habits],
        habit_entries=[HabitEntryRecord(**e.model_dump()) for e in payload.habit_entries],
    )


def _to_out(insight: Insight) -> InsightOut:
    return InsightOut(
        user_id=insight.user_id,
        insight_type=insight.insight_type,
        title=insight.title,
        description=insight.description,
        confidence=insight.confidence,
        priority=insight.priority,
        action_items=insight.action_items,
        data=insight.data,
        is_active=insight.is_active,
        created_at=insight.created_at,
    )


def track_event(store: InsightStore, user_id: str, payload: TrackEventIn) -> None:
    store.track(
        AnalyticsEvent(
            user_id=user_id,
            event_type=payload.event_type,
            timestamp=payload.timestamp or datetime.now(timezone.utc),
            entity_id=payload.entity_id,
            entity_type=payload.entity_type,
            metadata=payload.metadata,
        )
    )


def generate_insights(
    engine: InsightEngine,
    store: InsightStore,
    user_id: str,
    payload: GenerateInsightsIn,
) -> list[InsightOut]:
    """Analyse the snapshot plus tracked events; the new batch replaces the stored one."""
    insights = engine.generate_insights(user_id, _build_activity(payload), store.events(user_id))
    store.replace_insights(user_id, insights)
    return [_to_out(i) for i in insights]


def list_insights(store: InsightStore, user_id: str) -> list[InsightOut]:
    return [_to_out(i) for i in store.insights(user_id)]


def recommendations(store: InsightStore, user_id: str) -> RecommendationsOut:
    return RecommendationsOut(recommendations=recommendations_from(store.insights(user_id)))
