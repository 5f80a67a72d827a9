"""Pydantic schemas for event tracking and insight generation."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from goalcoach.backend.schemas.base import CamelModel

# ── Request models ──────────────────────────────────────────────────────────


class TrackEventIn(CamelModel):
    event_type: str = Field(min_length=1)
    entity_id: int | None = None
    entity_type: str | None = None
    metadata: dict[str, Any] | None = None
    timestamp: datetime | None = None


class GoalIn(CamelModel):
    id: int
    title: str
    status: str = "active"
    progress: int = Field(default=0, ge=0, le=100)
    category_id: int | None = None
    created_at: datetime | None = None
    completed_at: datetime | None = None


class TaskIn(CamelModel):
    id: int
    goal_id: int
    title: str
    status: str = "pending"
    created_at: datetime | None = None
    completed_at: datetime | None = None


class ProgressEntryIn(CamelModel):
    goal_id: int
    date: datetime
    progress_percent: int = Field(ge=0, le=100)
    mood: int | None = Field(default=None, ge=1, le=10)


class HabitIn(CamelModel):
    id: int
    name: str
    current_streak: int = 0


class HabitEntryIn(CamelModel):
    habit_id: int
    date: datetime
    completed: bool


class GenerateInsightsIn(CamelModel):
    """Snapshot of the user's goal data to analyse."""

    goals: list[GoalIn] = Field(default_factory=list)
    tasks: list[TaskIn] = Field(default_factory=list)
    progress_entries: list[ProgressEntryIn] = Field(default_factory=list)
    habits: list[HabitIn] = Field(default_factory=list)
    habit_entries: list[HabitEntryIn] = Field(default_factory=list)


# ── Response models ─────────────────────────────────────────────────────────


class SuccessOut(BaseModel):
    success: bool = True


class InsightOut(CamelModel):
    user_id: str
    insight_type: str
    title: str
    description: str
    confidence: int
    priority: str
    action_items: list[str]
    data: dict[str, Any]
    is_active: bool
    created_at: datetime


class RecommendationsOut(BaseModel):
    recommendations: list[str]
