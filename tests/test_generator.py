"""
Unit tests for the LLM-backed suggestion generator.

The fake client from conftest.py scripts the model answers; every
operation is checked for the happy path and for falling back to static
data.
"""

from __future__ import annotations

import json

import pytest

from goalcoach.backend.core.llm import LLMError
from goalcoach.backend.core.suggestions import SuggestionGenerator, priority_for, quadrant_for
from goalcoach.backend.core.suggestions import fallbacks


@pytest.fixture
def generator(fake_client) -> SuggestionGenerator:
    return SuggestionGenerator(fake_client)


# ── Eisenhower helpers ──────────────────────────────────────────────────────


class TestQuadrants:
    @pytest.mark.parametrize(
        "urgency, importance, quadrant, priority",
        [
            ("urgent", "important", "do_first", "high"),
            ("not_urgent", "important", "schedule", "medium"),
            ("urgent", "not_important", "delegate", "medium"),
            ("not_urgent", "not_important", "eliminate", "low"),
        ],
    )
    def test_mapping(self, urgency, importance, quadrant, priority) -> None:
        assert quadrant_for(urgency, importance) == quadrant
        assert priority_for(urgency, importance) == priority

    @pytest.mark.parametrize("urgency, importance", [("soon", "important"), (None, None), (["urgent"], "important")])
    def test_invalid(self, urgency, importance) -> None:
        with pytest.raises(ValueError):
            quadrant_for(urgency, importance)


# ── Journal prompts ─────────────────────────────────────────────────────────


class TestJournalPrompts:
    def test_json_answer(self, generator, fake_client) -> None:
        fake_client.queue_json({"prompts": [f"Prompt {i}" for i in range(7)]})

        prompts = generator.journal_prompts("career", "positive")

        assert prompts == [f"Prompt {i}" for i in range(5)]
        call = fake_client.calls[0]
        assert "career" in call["prompt"]
        assert "positive" in call["prompt"]
        assert call["json_mode"] is True

    def test_defaults_in_prompt(self, generator, fake_client) -> None:
        fake_client.queue_json(["a", "b"])
        assert generator.journal_prompts() == ["a", "b"]
        assert "personal development" in fake_client.calls[0]["prompt"]
        assert "motivated" in fake_client.calls[0]["prompt"]

    def test_plain_text_answer_split_into_lines(self, generator, fake_client) -> None:
        fake_client.queue("1. What went well?\n2. What did I learn?\n3. What is next?")
        assert generator.journal_prompts() == ["What went well?", "What did I learn?", "What is next?"]

    def test_llm_failure_uses_fallback(self, generator, fake_client) -> None:
        fake_client.queue(LLMError("boom"))
        assert generator.journal_prompts("health", "neutral") == fallbacks.JOURNAL_PROMPTS["health"]

    def test_empty_answer_uses_fallback(self, generator, fake_client) -> None:
        fake_client.queue("   ")
        prompts = generator.journal_prompts("personal_development", "reflective")
        assert prompts == fallbacks.JOURNAL_PROMPTS["personal_development"]["reflective"]

    @pytest.mark.parametrize(
        "payload",
        [{"journal_prompts": ["a?", "b?"]}, {"prompts": []}, {"prompts": "one long string"}, 42],
    )
    def test_json_with_wrong_shape_uses_fallback(self, generator, fake_client, payload) -> None:
        fake_client.queue(json.dumps(payload, indent=2))
        assert generator.journal_prompts("career", None) == fallbacks.JOURNAL_PROMPTS["career"]


# ── Core values, fitness, wellness ──────────────────────────────────────────


class TestCoreValues:
    def test_valid_answer(self, generator, fake_client) -> None:
        fake_client.queue_json({"exercise": "Reflect.", "questions": ["Q1"], "values": ["Joy", "Peace"]})
        assert generator.core_values_exercise() == {
            "exercise": "Reflect.",
            "questions": ["Q1"],
            "values": ["Joy", "Peace"],
        }

    @pytest.mark.parametrize(
        "answer",
        [
            "not json",
            json.dumps({"questions": ["Q1"], "values": ["Joy"]}),
            json.dumps({"exercise": "Reflect.", "questions": [], "values": ["Joy"]}),
            json.dumps(["Joy"]),
        ],
    )
    def test_bad_answer_uses_fallback(self, generator, fake_client, answer) -> None:
        fake_client.queue(answer)
        assert generator.core_values_exercise() == fallbacks.CORE_VALUES_EXERCISE


class TestFitness:
    def test_valid_plan(self, generator, fake_client) -> None:
        plan = {
            "workoutPlan": [{"day": "Tuesday", "focus": "Legs", "exercises": [{"name": "Lunges", "sets": 3}]}],
            "nutritionTips": ["Eat protein"],
        }
        fake_client.queue_json(plan)

        assert generator.fitness_recommendations("advanced", ["build strength"], 45) == plan
        prompt = fake_client.calls[0]["prompt"]
        assert "advanced" in prompt
        assert "build strength" in prompt
        assert "45 minutes" in prompt

    def test_no_goals_mentions_general_fitness(self, generator, fake_client) -> None:
        generator.fitness_recommendations("beginner", [], 20)
        assert "general fitness" in fake_client.calls[0]["prompt"]

    @pytest.mark.parametrize(
        "answer",
        [
            LLMError("down"),
            "{}",
            json.dumps({"workoutPlan": [], "nutritionTips": ["x"]}),
            json.dumps({"workoutPlan": ["Monday"], "nutritionTips": ["x"]}),
        ],
    )
    def test_failures_return_full_fallback_plan(self, generator, fake_client, answer) -> None:
        fake_client.queue(answer)
        assert generator.fitness_recommendations("beginner", ["lose weight"], 30) == fallbacks.FITNESS_PLAN


class TestWellness:
    def test_valid_answer_fills_missing_message(self, generator, fake_client) -> None:
        suggestion = {"category": "mindfulness", "title": "Breathe", "description": "Slow down."}
        fake_client.queue_json({"suggestions": [suggestion], "focusArea": "Calm"})

        result = generator.wellness_suggestions(["mindfulness"])

        assert result["suggestions"] == [suggestion]
        assert result["focusArea"] == "Calm"
        assert result["personalizedMessage"] == fallbacks.WELLNESS_SUGGESTIONS["personalizedMessage"]
        assert "mindfulness" in fake_client.calls[0]["prompt"]

    def test_default_categories_in_prompt(self, generator, fake_client) -> None:
        generator.wellness_suggestions()
        for category in fallbacks.WELLNESS_CATEGORIES:
            assert category in fake_client.calls[0]["prompt"]

    def test_failure_uses_filtered_fallback(self, generator, fake_client) -> None:
        fake_client.queue_json({"suggestions": [{"title": "No description"}]})
        result = generator.wellness_suggestions(["nutrition"])
        assert [s["category"] for s in result["suggestions"]] == ["nutrition"]

    @pytest.mark.parametrize("message, focus", [({"text": "hi"}, ["Calm"]), (42, "   ")])
    def test_non_text_message_fields_use_fallback_text(self, generator, fake_client, message, focus) -> None:
        suggestion = {"category": "goals", "title": "Review", "description": "Weekly check-in."}
        fake_client.queue_json({"suggestions": [suggestion], "personalizedMessage": message, "focusArea": focus})

        result = generator.wellness_suggestions()

        assert result["suggestions"] == [suggestion]
        assert result["personalizedMessage"] == fallbacks.WELLNESS_SUGGESTIONS["personalizedMessage"]
        assert result["focusArea"] == fallbacks.WELLNESS_SUGGESTIONS["focusArea"]


# ── Goals and progress ──────────────────────────────────────────────────────


class TestShortAnswers:
    def test_quote_strips_quotes(self, generator, fake_client) -> None:
        fake_client.queue('  "Small steps build big dreams."  ')
        assert generator.motivational_quote("Run a marathon") == "Small steps build big dreams."
        call = fake_client.calls[0]
        assert call["max_tokens"] == 100
        assert "Run a marathon" in call["prompt"]
        assert call["json_mode"] is False

    def test_quote_fallback(self, failing_client) -> None:
        assert SuggestionGenerator(failing_client).motivational_quote() == fallbacks.MOTIVATIONAL_QUOTE

    def test_empty_quote_fallback(self, generator, fake_client) -> None:
        fake_client.queue('""')
        assert generator.motivational_quote() == fallbacks.MOTIVATIONAL_QUOTE

    def test_progress_insight(self, generator, fake_client) -> None:
        fake_client.queue("Halfway there, schedule your next long run.")
        insight = generator.progress_insight("Run a marathon", 50.0)
        assert insight == "Halfway there, schedule your next long run."
        assert "50% complete" in fake_client.calls[0]["prompt"]
        assert fake_client.calls[0]["max_tokens"] == 80

    def test_progress_insight_fallback(self, failing_client) -> None:
        insight = SuggestionGenerator(failing_client).progress_insight("Run", 10)
        assert insight == fallbacks.PROGRESS_INSIGHT

    def test_goal_suggestions_capped_at_three(self, generator, fake_client) -> None:
        fake_client.queue_json({"suggestions": ["G1", "G2", "G3", "G4"]})
        assert generator.goal_suggestions("get fit") == ["G1", "G2", "G3"]

    def test_goal_suggestions_empty_on_failure(self, failing_client) -> None:
        assert SuggestionGenerator(failing_client).goal_suggestions("get fit") == []


# ── Tasks ───────────────────────────────────────────────────────────────────


class TestTaskSuggestions:
    def test_valid_tasks_normalised(self, generator, fake_client) -> None:
        fake_client.queue_json(
            {
                "tasks": [
                    {
                        "title": "Book a physical",
                        "description": "Check in with a doctor",
                        "priority": "high",
                        "urgency": "urgent",
                        "importance": "important",
                        "estimatedHours": 1,
                    },
                    {
                        "title": "Buy shoes",
                        "urgency": "not_urgent",
                        "importance": "not_important",
                        "priority": "urgent!!",
                        "estimatedHours": "lots",
                    },
                ]
            }
        )

        tasks = generator.task_suggestions("Run a marathon", "First race")

        assert [t["title"] for t in tasks] == ["Book a physical", "Buy shoes"]
        assert tasks[1]["priority"] == "low"
        assert tasks[1]["estimatedHours"] == 1.0
        assert tasks[1]["description"] == ""
        assert "First race" in fake_client.calls[0]["prompt"]

    def test_malformed_tasks_dropped(self, generator, fake_client) -> None:
        fake_client.queue_json(
            [
                {"title": "Keep", "urgency": "urgent", "importance": "important"},
                {"title": "", "urgency": "urgent", "importance": "important"},
                {"title": "Bad matrix", "urgency": "sometime", "importance": "important"},
                "not a task",
            ]
        )
        assert [t["title"] for t in generator.task_suggestions("Goal")] == ["Keep"]

    def test_nothing_usable_falls_back_to_generic(self, generator, fake_client) -> None:
        fake_client.queue_json({"tasks": [{"title": "No matrix"}]})
        assert generator.task_suggestions("Learn guitar") == fallbacks.GENERIC_TASKS

    def test_failure_falls_back_to_investment_tasks(self, failing_client) -> None:
        tasks = SuggestionGenerator(failing_client).task_suggestions("Invest for retirement")
        assert tasks == fallbacks.INVESTMENT_TASKS
