"""Goal activity analytics: insight generation and the in-process store."""

from goalcoach.backend.core.analytics.engine import InsightEngine, recommendations_from
from goalcoach.backend.core.analytics.records import (
    AnalyticsEvent,
    GoalRecord,
    HabitEntryRecord,
    HabitRecord,
    Insight,
    ProgressRecord,
    TaskRecord,
    UserActivity,
)
from goalcoach.backend.core.analytics.store import InsightStore

__all__ = [
    "AnalyticsEvent",
    "GoalRecord",
    "HabitEntryRecord",
    "HabitRecord",
    "Insight",
    "InsightEngine",
    "InsightStore",
    "ProgressRecord",
    "TaskRecord",
    "UserActivity",
    "recommendations_from",
]
