"""
Unit tests for the static fallback suggestions.
"""

from __future__ import annotations

import pytest

from goalcoach.backend.core.suggestions import fallbacks


class TestJournalPrompts:
    @pytest.mark.parametrize("mood", ["positive", "neutral", "reflective"])
    def test_mood_specific_set(self, mood) -> None:
        prompts = fallbacks.fallback_journal_prompts("personal_development", mood)
        assert prompts == fallbacks.JOURNAL_PROMPTS["personal_development"][mood]

    def test_flat_set_ignores_mood(self) -> None:
        assert fallbacks.fallback_journal_prompts("career", "positive") == fallbacks.JOURNAL_PROMPTS["career"]

    @pytest.mark.parametrize(
        "goal_type, mood",
        [(None, None), ("unknown", "positive"), ("personal_development", "ecstatic")],
    )
    def test_default_set(self, goal_type, mood) -> None:
        prompts = fallbacks.fallback_journal_prompts(goal_type, mood)
        assert prompts == fallbacks.JOURNAL_PROMPTS["personal_development"]["neutral"]

    def test_returns_copy(self) -> None:
        fallbacks.fallback_journal_prompts("health").clear()
        assert len(fallbacks.JOURNAL_PROMPTS["health"]) == 5


class TestStaticSets:
    def test_core_values_shape(self) -> None:
        exercise = fallbacks.fallback_core_values()
        assert len(exercise["questions"]) == 5
        assert len(exercise["values"]) == 20
        assert exercise["exercise"]

    def test_fitness_plan_shape(self) -> None:
        plan = fallbacks.fallback_fitness_plan()
        assert [d["day"] for d in plan["workoutPlan"]] == ["Monday", "Wednesday", "Friday"]
        assert len(plan["nutritionTips"]) == 5

    def test_fitness_plan_is_deep_copy(self) -> None:
        fallbacks.fallback_fitness_plan()["workoutPlan"][0]["exercises"].clear()
        assert fallbacks.FITNESS_PLAN["workoutPlan"][0]["exercises"]

    def test_default_categories(self) -> None:
        categories = fallbacks.default_categories()
        assert len(categories) == 6
        assert all(set(c) == {"name", "icon", "color"} for c in categories)


class TestWellness:
    def test_all_categories_by_default(self) -> None:
        result = fallbacks.fallback_wellness()
        assert [s["category"] for s in result["suggestions"]] == list(fallbacks.WELLNESS_CATEGORIES)
        assert result["personalizedMessage"]
        assert result["focusArea"] == "Building Sustainable Daily Habits"

    def test_filtered(self) -> None:
        result = fallbacks.fallback_wellness(["Fitness", "mindfulness"])
        assert [s["category"] for s in result["suggestions"]] == ["fitness", "mindfulness"]

    def test_filter_matching_nothing_returns_all(self) -> None:
        assert len(fallbacks.fallback_wellness(["finance"])["suggestions"]) == 5


class TestTasks:
    @pytest.mark.parametrize("title", ["Invest $500 monthly", "Plan for RETIREMENT"])
    def test_investment_set(self, title) -> None:
        assert fallbacks.fallback_tasks(title) == fallbacks.INVESTMENT_TASKS

    def test_generic_set(self) -> None:
        tasks = fallbacks.fallback_tasks("Learn to paint")
        assert tasks == fallbacks.GENERIC_TASKS
        assert len(tasks) == 6
