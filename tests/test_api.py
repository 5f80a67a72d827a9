"""
Integration tests for the REST API.

The app is built with ``create_app`` and an injected fake LLM client, so
no provider is contacted. ``TestClient`` is used as a context manager so
the lifespan handler runs.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from goalcoach import __version__
from goalcoach.backend.api.app import create_app
from goalcoach.backend.core.suggestions import fallbacks
from goalcoach.backend.core.utils.config import get_default_config


@pytest.fixture
def client(fake_client):
    app = create_app(get_default_config(), client=fake_client)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def offline_client(failing_client):
    app = create_app(get_default_config(), client=failing_client)
    with TestClient(app) as test_client:
        yield test_client


def _snapshot() -> dict:
    return {
        "goals": [
            {"id": 1, "title": "Run", "status": "active", "progress": 30},
            {"id": 2, "title": "Read", "status": "completed", "progress": 100, "categoryId": 3},
        ],
        # Four completed tasks: one short of a velocity insight
        "tasks": [{"id": i, "goalId": 1, "title": f"Task {i}", "status": "completed"} for i in range(4)]
        + [{"id": 9, "goalId": 1, "title": "Open task"}],
        "progressEntries": [{"goalId": 1, "date": "2025-06-01T10:00:00Z", "progressPercent": 30, "mood": 6}],
        "habits": [{"id": 1, "name": "Meditate", "currentStreak": 2}],
        "habitEntries": [],
    }


class TestBasics:
    def test_health(self, client) -> None:
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}

    def test_categories(self, client) -> None:
        response = client.get("/api/categories")
        assert response.status_code == 200
        assert response.json() == fallbacks.DEFAULT_CATEGORIES

    def test_unknown_route_uses_message_body(self, client) -> None:
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert "message" in response.json()


class TestSuggestionEndpoints:
    def test_motivation(self, client, fake_client) -> None:
        fake_client.queue("Dream big, start small.")
        response = client.get("/api/ai/motivation", params={"goalTitle": "Write a novel"})
        assert response.json() == {"quote": "Dream big, start small."}
        assert "Write a novel" in fake_client.calls[0]["prompt"]

    def test_goal_suggestions(self, client, fake_client) -> None:
        fake_client.queue_json({"suggestions": ["Run 5k by June"]})
        response = client.post("/api/ai/goal-suggestions", json={"idea": "get fit"})
        assert response.status_code == 200
        assert response.json() == {"suggestions": ["Run 5k by June"]}

    @pytest.mark.parametrize("body", [{"idea": "   "}, {}])
    def test_goal_suggestions_rejects_blank_idea(self, client, fake_client, body) -> None:
        response = client.post("/api/ai/goal-suggestions", json=body)
        assert response.status_code == 400
        payload = response.json()
        assert payload["message"] == "Invalid request"
        assert payload["errors"][0]["field"] == "idea"
        assert fake_client.calls == []

    def test_task_suggestions_add_quadrant(self, client, fake_client) -> None:
        fake_client.queue_json(
            {"tasks": [{"title": "Plan", "urgency": "not_urgent", "importance": "important", "estimatedHours": 2}]}
        )
        response = client.post(
            "/api/ai/task-suggestions", json={"goalTitle": "Learn Go", "goalDescription": "Backend work"}
        )
        assert response.status_code == 200
        assert response.json() == [
            {
                "title": "Plan",
                "description": "",
                "priority": "medium",
                "urgency": "not_urgent",
                "importance": "important",
                "estimatedHours": 2.0,
                "quadrant": "schedule",
            }
        ]

    def test_task_suggestions_fallback(self, offline_client) -> None:
        response = offline_client.post("/api/ai/task-suggestions", json={"goalTitle": "Invest wisely"})
        tasks = response.json()
        assert [t["title"] for t in tasks] == [t["title"] for t in fallbacks.INVESTMENT_TASKS]
        assert tasks[0]["quadrant"] == "do_first"

    def test_progress_insight(self, client, fake_client) -> None:
        fake_client.queue("Great pace!")
        response = client.post(
            "/api/ai/progress-insight", json={"goalTitle": "Save $1000", "progressPercentage": 42}
        )
        assert response.json() == {"insight": "Great pace!"}

    @pytest.mark.parametrize(
        "body",
        [
            {"progressPercentage": 10},
            {"goalTitle": "Save", "progressPercentage": "lots"},
            {"goalTitle": "Save", "progressPercentage": 120},
            {"goalTitle": "Save", "progressPercentage": "50"},
        ],
    )
    def test_progress_insight_validation(self, client, body) -> None:
        assert client.post("/api/ai/progress-insight", json=body).status_code == 400

    def test_journal_prompts_query_params(self, client, fake_client) -> None:
        fake_client.queue_json({"prompts": ["One", "Two"]})
        response = client.get("/api/ai/journal-prompts", params={"goalType": "career", "mood": "positive"})
        assert response.json() == {"prompts": ["One", "Two"]}
        assert "career" in fake_client.calls[0]["prompt"]

    def test_journal_prompts_fallback(self, offline_client) -> None:
        response = offline_client.get("/api/ai/journal-prompts")
        assert response.json() == {"prompts": fallbacks.JOURNAL_PROMPTS["personal_development"]["neutral"]}

    def test_core_values_fallback(self, offline_client) -> None:
        assert offline_client.get("/api/ai/core-values-exercise").json() == fallbacks.CORE_VALUES_EXERCISE

    def test_fitness_fallback_uses_camel_case(self, offline_client) -> None:
        response = offline_client.post(
            "/api/ai/fitness-recommendations",
            json={"fitnessLevel": "beginner", "goals": ["lose weight"], "timeAvailable": 30},
        )
        assert response.status_code == 200
        assert response.json() == fallbacks.FITNESS_PLAN

    def test_wellness_without_body(self, offline_client) -> None:
        response = offline_client.post("/api/ai/wellness-suggestions")
        assert response.status_code == 200
        assert len(response.json()["suggestions"]) == 5

    def test_wellness_filtered_fallback(self, offline_client) -> None:
        response = offline_client.post("/api/ai/wellness-suggestions", json={"includeCategories": ["goals"]})
        body = response.json()
        assert [s["category"] for s in body["suggestions"]] == ["goals"]
        assert body["focusArea"] == fallbacks.WELLNESS_SUGGESTIONS["focusArea"]

    def test_wellness_with_non_text_message(self, client, fake_client) -> None:
        suggestion = {"category": "fitness", "title": "Walk", "description": "Walk after lunch."}
        fake_client.queue_json({"suggestions": [suggestion], "personalizedMessage": {"text": "hi"}, "focusArea": "Energy"})

        response = client.post("/api/ai/wellness-suggestions", json={})

        assert response.status_code == 200
        body = response.json()
        assert body["suggestions"] == [suggestion]
        assert body["personalizedMessage"] == fallbacks.WELLNESS_SUGGESTIONS["personalizedMessage"]
        assert body["focusArea"] == "Energy"

    def test_progress_insight_accepts_integer_percentage(self, client, fake_client) -> None:
        fake_client.queue("Keep it up.")
        response = client.post("/api/ai/progress-insight", json={"goalTitle": "Save", "progressPercentage": 50})
        assert response.status_code == 200


class TestAnalyticsEndpoints:
    def test_track_event(self, client) -> None:
        response = client.post(
            "/api/analytics/track-event",
            json={"eventType": "task_completed", "entityId": 4, "entityType": "task"},
            headers={"X-User-Id": "alex"},
        )
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert len(client.app.state.store.events("alex")) == 1
        assert client.app.state.store.events("demo_user") == []

    def test_track_event_requires_type(self, client) -> None:
        assert client.post("/api/analytics/track-event", json={}).status_code == 400

    def test_generate_then_list_insights(self, offline_client) -> None:
        response = offline_client.post("/api/analytics/generate-insights", json=_snapshot())
        assert response.status_code == 200
        generated = response.json()
        assert {i["insightType"] for i in generated} == {"habit_consistency"}
        assert generated[0]["userId"] == "demo_user"
        assert generated[0]["actionItems"]

        stored = offline_client.get("/api/analytics/insights").json()
        assert [i["title"] for i in stored] == [i["title"] for i in generated]

    def test_insights_are_per_user(self, offline_client) -> None:
        offline_client.post("/api/analytics/generate-insights", json=_snapshot(), headers={"X-User-Id": "sam"})
        assert offline_client.get("/api/analytics/insights").json() == []
        assert offline_client.get("/api/analytics/insights", headers={"X-User-Id": "sam"}).json()

    def test_recommendations_from_high_priority_insights(self, offline_client) -> None:
        # No habit entries in the snapshot: 0% consistency is high priority
        offline_client.post("/api/analytics/generate-insights", json=_snapshot())
        recommendations = offline_client.get("/api/analytics/recommendations").json()["recommendations"]
        assert recommendations == [
            "Focus on building one habit at a time to improve consistency.",
            "Set up environmental cues to trigger habit execution.",
        ]

    def test_recommendations_default(self, client) -> None:
        body = client.get("/api/analytics/recommendations").json()
        assert len(body["recommendations"]) == 3

    def test_invalid_snapshot(self, client) -> None:
        response = client.post("/api/analytics/generate-insights", json={"goals": [{"title": "no id"}]})
        assert response.status_code == 400

    def test_engine_failure_returns_500(self, client, monkeypatch) -> None:
        def boom(*args, **kwargs):
            raise RuntimeError("engine exploded")

        monkeypatch.setattr(client.app.state.engine, "generate_insights", boom)
        response = client.post("/api/analytics/generate-insights", json=_snapshot())
        assert response.status_code == 500
        assert response.json() == {"message": "Failed to generate insights"}
