"""Shared pytest fixtures for the test suite.

Import any of these in a test file by simply declaring the fixture name as a
parameter — pytest discovers them automatically from this conftest.py.

Fixture overview
----------------
fake_client      — scripted LLM client; queue answers or errors per call
failing_client   — LLM client whose every call raises LLMError
fixed_now        — the frozen "now" used by the insight engine tests
sample_activity  — a small goal/task/habit snapshot with enough data for
                   every statistical analysis
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from goalcoach.backend.core.analytics import (
    GoalRecord,
    HabitEntryRecord,
    HabitRecord,
    ProgressRecord,
    TaskRecord,
    UserActivity,
)
from goalcoach.backend.core.llm import LLMClient, LLMError


class FakeClient(LLMClient):
    """
    Completion client answering from a queue.

    Each queued item is returned once, in order; an exception instance is
    raised instead. When the queue is empty ``default`` is returned. With
    ``error`` set every call raises it.
    """

    provider = "fake"
    api_key_env = "FAKE_API_KEY"

    def __init__(self, *answers, default: str = "", error: Exception | None = None):
        super().__init__(model="fake-model")
        self.answers = list(answers)
        self.default = default
        self.error = error
        self.calls: list[dict] = []

    def queue(self, *answers) -> None:
        self.answers.extend(answers)

    def queue_json(self, payload) -> None:
        self.answers.append(json.dumps(payload))

    def _build_sdk(self):
        return None

    def complete(self, prompt, *, system=None, max_tokens=None, json_mode=False) -> str:
        self.calls.append(
            {"prompt": prompt, "system": system, "max_tokens": max_tokens, "json_mode": json_mode}
        )
        if self.error is not None:
            raise self.error
        answer = self.answers.pop(0) if self.answers else self.default
        if isinstance(answer, Exception):
            raise answer
        return answer


# ── LLM clients ──────────────────────────────────────────────────────────────


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()


@pytest.fixture
def failing_client() -> FakeClient:
    """Every call fails the way an unreachable provider does."""
    return FakeClient(error=LLMError("provider unreachable"))


# ── Analytics ────────────────────────────────────────────────────────────────


@pytest.fixture
def fixed_now() -> datetime:
    """Wednesday 2025-06-18 12:00 UTC."""
    return datetime(2025, 6, 18, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def sample_activity(fixed_now) -> UserActivity:
    """
    Two active and two completed goals, eight tasks (six completed in the
    last month), one progress entry per day for the last five days and two
    habits with ten days of entries each.
    """
    day = timedelta(days=1)
    goals = [
        GoalRecord(id=1, title="Run a half marathon", progress=40, category_id=1),
        GoalRecord(id=2, title="Learn Spanish", progress=60, category_id=2),
        GoalRecord(
            id=3,
            title="Read 12 books",
            status="completed",
            progress=100,
            category_id=3,
            created_at=fixed_now - 60 * day,
            completed_at=fixed_now - 20 * day,
        ),
        GoalRecord(
            id=4,
            title="Save emergency fund",
            status="completed",
            progress=100,
            category_id=3,
            created_at=fixed_now - 50 * day,
            completed_at=fixed_now - 30 * day,
        ),
    ]
    tasks = [
        TaskRecord(
            id=i,
            goal_id=1,
            title=f"Task {i}",
            status="completed",
            completed_at=fixed_now - i * 2 * day,
        )
        for i in range(1, 7)
    ] + [
        TaskRecord(id=7, goal_id=2, title="Task 7"),
        TaskRecord(id=8, goal_id=2, title="Task 8", status="in_progress"),
    ]
    progress = [
        ProgressRecord(goal_id=1, date=fixed_now - i * day, progress_percent=40 - i, mood=7)
        for i in range(5)
    ]
    habits = [HabitRecord(id=1, name="Meditate", current_streak=9), HabitRecord(id=2, name="Stretch")]
    entries = [
        HabitEntryRecord(habit_id=1, date=fixed_now - i * day, completed=i != 4) for i in range(10)
    ] + [HabitEntryRecord(habit_id=2, date=fixed_now - i * day, completed=i < 3) for i in range(10)]
    return UserActivity(
        goals=goals, tasks=tasks, progress_entries=progress, habits=habits, habit_entries=entries
    )
