"""Schema package – re-exports all public symbols for convenient imports."""

from __future__ import annotations

from goalcoach.backend.schemas.analytics import (
    GenerateInsightsIn,
    GoalIn,
    HabitEntryIn,
    HabitIn,
    InsightOut,
    ProgressEntryIn,
    RecommendationsOut,
    SuccessOut,
    TaskIn,
    TrackEventIn,
)
from goalcoach.backend.schemas.suggestions import (
    CategoryOut,
    CoreValuesOut,
    FitnessIn,
    FitnessPlanOut,
    GoalSuggestionsIn,
    GoalSuggestionsOut,
    HealthOut,
    JournalPromptsOut,
    ProgressInsightIn,
    ProgressInsightOut,
    QuoteOut,
    TaskSuggestionOut,
    TaskSuggestionsIn,
    WellnessIn,
    WellnessOut,
)

__all__ = [
    "CategoryOut",
    "CoreValuesOut",
    "FitnessIn",
    "FitnessPlanOut",
    "GenerateInsightsIn",
    "GoalIn",
    "GoalSuggestionsIn",
    "GoalSuggestionsOut",
    "HabitEntryIn",
    "HabitIn",
    "HealthOut",
    "InsightOut",
    "JournalPromptsOut",
    "ProgressEntryIn",
    "ProgressInsightIn",
    "ProgressInsightOut",
    "QuoteOut",
    "RecommendationsOut",
    "SuccessOut",
    "TaskIn",
    "TaskSuggestionOut",
    "TaskSuggestionsIn",
    "TrackEventIn",
    "WellnessIn",
    "WellnessOut",
]
