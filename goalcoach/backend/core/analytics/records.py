"""
Plain data records consumed and produced by the insight engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so aware and naive inputs compare."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class GoalRecord:
    id: int
    title: str
    status: str = "active"  # active, completed, paused
    progress: int = 0  # 0-100
    category_id: int | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None


@dataclass
class TaskRecord:
    id: int
    goal_id: int
    title: str
    status: str = "pending"  # pending, in_progress, completed
    created_at: datetime | None = None
    completed_at: datetime | None = None

    @property
    def is_completed(self) -> bool:
        return self.status == "completed"


@dataclass
class ProgressRecord:
    goal_id: int
    date: datetime
    progress_percent: int
    mood: int | None = None  # 1-10


@dataclass
class HabitRecord:
    id: int
    name: str
    current_streak: int = 0


@dataclass
class HabitEntryRecord:
    habit_id: int
    date: datetime
    completed: bool


@dataclass
class AnalyticsEvent:
    """A tracked user action (goal_created, task_completed, ...)."""

    user_id: str
    event_type: str
    timestamp: datetime
    entity_id: int | None = None
    entity_type: str | None = None
    metadata: dict[str, Any] | None = None


@dataclass
class UserActivity:
    """Snapshot of a user's goal data handed to the insight engine."""

    goals: list[GoalRecord] = field(default_factory=list)
    tasks: list[TaskRecord] = field(default_factory=list)
    progress_entries: list[ProgressRecord] = field(default_factory=list)
    habits: list[HabitRecord] = field(default_factory=list)
    habit_entries: list[HabitEntryRecord] = field(default_factory=list)


@dataclass
class Insight:
    """
    One generated insight.

    Attributes:
        user_id: Owner of the insight
        insight_type: completion_prediction, productivity_pattern, task_velocity,
            habit_consistency or success_factors
        title: Headline shown on the dashboard card
        description: One or two sentences of explanation
        confidence: Confidence score 0-100
        priority: high, medium or low
        action_items: Suggested next actions
        data: Supporting metrics
        is_active: False once superseded by a newer batch
        created_at: Generation time
    """

    user_id: str
    insight_type: str
    title: str
    description: str
    confidence: int
    priority: str = "medium"
    action_items: list[str] = field(default_factory=list)
    data: dict[str, Any] = field(default_factory=dict)
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
