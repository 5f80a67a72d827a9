"""API route handlers.

Suggestion endpoints live under ``/ai`` and analytics under
``/analytics``; the router is included into the FastAPI application in
``app.py`` with the ``/api`` prefix.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Annotated

from fastapi import APIRouter, Header, HTTPException, Query, Request

from goalcoach.backend.schemas import (
    CategoryOut,
    CoreValuesOut,
    FitnessIn,
    FitnessPlanOut,
    GenerateInsightsIn,
    GoalSuggestionsIn,
    GoalSuggestionsOut,
    HealthOut,
    InsightOut,
    JournalPromptsOut,
    ProgressInsightIn,
    ProgressInsightOut,
    QuoteOut,
    RecommendationsOut,
    SuccessOut,
    TaskSuggestionOut,
    TaskSuggestionsIn,
    TrackEventIn,
    WellnessIn,
    WellnessOut,
)
from goalcoach.backend.services import insights, suggestions

logger = logging.getLogger(__name__)

router = APIRouter()

DEFAULT_USER = "demo_user"

# No authentication: the caller names itself.
UserId = Annotated[str, Header(alias="X-User-Id")]


async def _run(label: str, func, *args):
    """Run a blocking service call off the event loop, mapping failures to 500."""
    try:
        return await asyncio.to_thread(func, *args)
    except Exception as exc:
        logger.exception("Failed to %s", label)
        raise HTTPException(status_code=500, detail=f"Failed to {label}") from exc


# ── Routes ─────────────────────────────────────────────────────────────────


@router.get("/health", response_model=HealthOut, include_in_schema=False)
async def health_check() -> HealthOut:
    """Liveness check (suppressed from access log via log filter)."""
    return HealthOut()


@router.get("/categories", response_model=list[CategoryOut])
async def get_categories() -> list[CategoryOut]:
    return suggestions.list_categories()


# ── AI suggestions ─────────────────────────────────────────────────────────


@router.get("/ai/motivation", response_model=QuoteOut)
async def get_motivation(
    request: Request,
    goal_title: Annotated[str | None, Query(alias="goalTitle")] = None,
) -> QuoteOut:
    return await _run(
        "generate motivational quote", suggestions.motivation, request.app.state.generator, goal_title
    )


@router.post("/ai/goal-suggestions", response_model=GoalSuggestionsOut)
async def post_goal_suggestions(request: Request, payload: GoalSuggestionsIn) -> GoalSuggestionsOut:
    return await _run(
        "generate goal suggestions", suggestions.goal_suggestions, request.app.state.generator, payload
    )


@router.post("/ai/task-suggestions", response_model=list[TaskSuggestionOut])
async def post_task_suggestions(request: Request, payload: TaskSuggestionsIn) -> list[TaskSuggestionOut]:
    """Break a goal into Eisenhower-matrix tasks, each tagged with its quadrant."""
    return await _run(
        "generate task suggestions", suggestions.task_suggestions, request.app.state.generator, payload
    )


@router.post("/ai/progress-insight", response_model=ProgressInsightOut)
async def post_progress_insight(request: Request, payload: ProgressInsightIn) -> ProgressInsightOut:
    return await _run(
        "generate progress insight", suggestions.progress_insight, request.app.state.generator, payload
    )


@router.get("/ai/journal-prompts", response_model=JournalPromptsOut)
async def get_journal_prompts(
    request: Request,
    goal_type: Annotated[str | None, Query(alias="goalType")] = None,
    mood: str | None = None,
) -> JournalPromptsOut:
    return await _run(
        "generate journal prompts",
        suggestions.journal_prompts,
        request.app.state.generator,
        goal_type,
        mood,
    )


@router.get("/ai/core-values-exercise", response_model=CoreValuesOut)
async def get_core_values_exercise(request: Request) -> CoreValuesOut:
    return await _run(
        "generate core values exercise", suggestions.core_values, request.app.state.generator
    )


@router.post("/ai/fitness-recommendations", response_model=FitnessPlanOut)
async def post_fitness_recommendations(request: Request, payload: FitnessIn) -> FitnessPlanOut:
    return await _run(
        "generate fitness recommendations", suggestions.fitness_plan, request.app.state.generator, payload
    )


@router.post("/ai/wellness-suggestions", response_model=WellnessOut)
async def post_wellness_suggestions(request: Request, payload: WellnessIn | None = None) -> WellnessOut:
    return await _run(
        "generate wellness suggestions",
        suggestions.wellness,
        request.app.state.generator,
        payload or WellnessIn(),
    )


# ── Analytics ──────────────────────────────────────────────────────────────


@router.post("/analytics/track-event", response_model=SuccessOut)
async def post_track_event(
    request: Request,
    payload: TrackEventIn,
    user_id: UserId = DEFAULT_USER,
) -> SuccessOut:
    insights.track_event(request.app.state.store, user_id, payload)
    return SuccessOut()


@router.post("/analytics/generate-insights", response_model=list[InsightOut])
async def post_generate_insights(
    request: Request,
    payload: GenerateInsightsIn,
    user_id: UserId = DEFAULT_USER,
) -> list[InsightOut]:
    """Analyse the posted goal data; the LLM-backed analyses make blocking calls."""
    state = request.app.state
    return await _run(
        "generate insights", insights.generate_insights, state.engine, state.store, user_id, payload
    )


@router.get("/analytics/insights", response_model=list[InsightOut])
async def get_insights(request: Request, user_id: UserId = DEFAULT_USER) -> list[InsightOut]:
    return insights.list_insights(request.app.state.store, user_id)


@router.get("/analytics/recommendations", response_model=RecommendationsOut)
async def get_recommendations(request: Request, user_id: UserId = DEFAULT_USER) -> RecommendationsOut:
    return insights.recommendations(request.app.state.store, user_id)
