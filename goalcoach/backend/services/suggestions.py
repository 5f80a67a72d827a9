"""Suggestion service – translates API schemas to generator calls.

All functions are blocking (one LLM round trip each) and are meant to be
called from a thread-pool worker via ``asyncio.to_thread``.
"""

from __future__ import annotations

import logging

from goalcoach.backend.core.suggestions import SuggestionGenerator, quadrant_for
from goalcoach.backend.core.suggestions.fallbacks import default_categories
from goalcoach.backend.schemas import (
    CategoryOut,
    CoreValuesOut,
    FitnessIn,
    FitnessPlanOut,
    GoalSuggestionsIn,
    GoalSuggestionsOut,
    JournalPromptsOut,
    ProgressInsightIn,
    ProgressInsightOut,
    QuoteOut,
    TaskSuggestionOut,
    TaskSuggestionsIn,
    WellnessIn,
    WellnessOut,
)

logger = logging.getLogger(__name__)


def list_categories() -> list[CategoryOut]:
    return [CategoryOut(**c) for c in default_categories()]


def motivation(generator: SuggestionGenerator, goal_title: str | None) -> QuoteOut:
    return QuoteOut(quote=generator.motivational_quote(goal_title or None))


def goal_suggestions(generator: SuggestionGenerator, payload: GoalSuggestionsIn) -> GoalSuggestionsOut:
    return GoalSuggestionsOut(suggestions=generator.goal_suggestions(payload.idea))


def task_suggestions(generator: SuggestionGenerator, payload: TaskSuggestionsIn) -> list[TaskSuggestionOut]:
    """Generated tasks, each tagged with its Eisenhower quadrant."""
    tasks = generator.task_suggestions(payload.goal_title, payload.goal_description)
    logger.info("Suggested %d tasks for goal %r", len(tasks), payload.goal_title)
    return [
        TaskSuggestionOut(
            title=t["title"],
            description=t.get("description", ""),
            priority=t["priority"],
            urgency=t["urgency"],
            importance=t["importance"],
            estimated_hours=t.get("estimatedHours", 1),
            quadrant=quadrant_for(t["urgency"], t["importance"]),
        )
        for t in tasks
    ]


def progress_insight(generator: SuggestionGenerator, payload: ProgressInsightIn) -> ProgressInsightOut:
    return ProgressInsightOut(
        insight=generator.progress_insight(payload.goal_title, payload.progress_percentage)
    )


def journal_prompts(
    generator: SuggestionGenerator,
    goal_type: str | None,
    mood: str | None,
) -> JournalPromptsOut:
    return JournalPromptsOut(prompts=generator.journal_prompts(goal_type, mood))


def core_values(generator: SuggestionGenerator) -> CoreValuesOut:
    return CoreValuesOut(**generator.core_values_exercise())


def fitness_plan(generator: SuggestionGenerator, payload: FitnessIn) -> FitnessPlanOut:
    plan = generator.fitness_recommendations(
        payload.fitness_level, payload.goals, payload.time_available
    )
    return FitnessPlanOut(workout_plan=plan["workoutPlan"], nutrition_tips=plan["nutritionTips"])


def wellness(generator: SuggestionGenerator, payload: WellnessIn) -> WellnessOut:
    result = generator.wellness_suggestions(payload.include_categories)
    return WellnessOut(
        suggestions=result["suggestions"],
        personalized_message=result["personalizedMessage"],
        focus_area=result["focusArea"],
    )
