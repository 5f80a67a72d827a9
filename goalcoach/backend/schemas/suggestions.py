"""Pydantic schemas for the coaching suggestion endpoints."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, Field

from goalcoach import __version__
from goalcoach.backend.schemas.base import CamelModel


def _not_blank(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("must not be blank")
    return value


NonBlankStr = Annotated[str, AfterValidator(_not_blank)]


# ── Request models ──────────────────────────────────────────────────────────


class GoalSuggestionsIn(CamelModel):
    idea: NonBlankStr


class TaskSuggestionsIn(CamelModel):
    goal_title: NonBlankStr
    goal_description: str = ""


class ProgressInsightIn(CamelModel):
    goal_title: NonBlankStr
    progress_percentage: Annotated[float, Field(ge=0, le=100, strict=True)]


class FitnessIn(CamelModel):
    fitness_level: str = "beginner"
    goals: list[str] = Field(default_factory=list)
    time_available: int = Field(default=30, gt=0)


class WellnessIn(CamelModel):
    include_categories: list[str] | None = None


# ── Response models ─────────────────────────────────────────────────────────


class HealthOut(BaseModel):
    status: str = "ok"
    version: str = __version__


class CategoryOut(BaseModel):
    name: str
    icon: str
    color: str


class QuoteOut(BaseModel):
    quote: str


class GoalSuggestionsOut(BaseModel):
    suggestions: list[str]


class TaskSuggestionOut(CamelModel):
    """One Eisenhower-matrix task."""

    title: str
    description: str = ""
    priority: str
    urgency: str
    importance: str
    estimated_hours: float = 1.0
    quadrant: str


class ProgressInsightOut(BaseModel):
    insight: str


class JournalPromptsOut(BaseModel):
    prompts: list[str]


class CoreValuesOut(BaseModel):
    exercise: str
    questions: list[str]
    values: list[str]


class FitnessPlanOut(CamelModel):
    workout_plan: list[dict[str, Any]]
    nutrition_tips: list[str]


class WellnessOut(CamelModel):
    suggestions: list[dict[str, Any]]
    personalized_message: str
    focus_area: str
