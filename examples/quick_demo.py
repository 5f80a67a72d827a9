#!/usr/bin/env python3
"""
Quick Demo: Suggestions and Insights

Generates a few coaching suggestions and runs the insight engine over a
made-up week of activity. Without ANTHROPIC_API_KEY (or OPENAI_API_KEY
with GOALCOACH_LLM_PROVIDER=openai) every suggestion comes from the
built-in fallbacks and the two LLM-backed insights are skipped.
"""

from datetime import datetime, timedelta, timezone

from dotenv import load_dotenv

from goalcoach.backend.core.analytics import (
    AnalyticsEvent,
    GoalRecord,
    HabitEntryRecord,
    HabitRecord,
    InsightEngine,
    TaskRecord,
    UserActivity,
    recommendations_from,
)
from goalcoach.backend.core.llm import create_client
from goalcoach.backend.core.suggestions import SuggestionGenerator, quadrant_for
from goalcoach.backend.core.utils.config import resolve_config


def main():
    """Print suggestions and insights for a demo user."""
    load_dotenv()
    cfg = resolve_config()
    client = create_client(cfg["llm"])
    generator = SuggestionGenerator(client)

    print("=" * 60)
    print(f"GoalCoach demo ({client.provider} / {client.model})")
    print("=" * 60)

    print("\nJournal prompts (career, reflective):")
    for prompt in generator.journal_prompts("career", "reflective"):
        print(f"  - {prompt}")

    print("\nTasks for 'Start investing for retirement':")
    print(f"{'Quadrant':<12}{'Priority':<10}{'Hours':<8}Task")
    print("-" * 60)
    for task in generator.task_suggestions("Start investing for retirement"):
        quadrant = quadrant_for(task["urgency"], task["importance"])
        print(f"{quadrant:<12}{task['priority']:<10}{task['estimatedHours']:<8g}{task['title']}")

    # A week of made-up activity
    now = datetime.now(timezone.utc)
    day = timedelta(days=1)
    activity = UserActivity(
        goals=[
            GoalRecord(id=1, title="Run a 10k", progress=45),
            GoalRecord(id=2, title="Read 6 books", status="completed", progress=100),
        ],
        tasks=[
            TaskRecord(id=i, goal_id=1, title=f"Run #{i}", status="completed", completed_at=now - i * day)
            for i in range(1, 8)
        ]
        + [TaskRecord(id=8, goal_id=1, title="Buy shoes")],
        habits=[HabitRecord(id=1, name="Stretch", current_streak=3)],
        habit_entries=[HabitEntryRecord(habit_id=1, date=now - i * day, completed=i % 2 == 0) for i in range(7)],
    )
    events = [
        AnalyticsEvent(user_id="demo_user", event_type="task_completed", timestamp=now - i * day)
        for i in range(1, 12)
    ]

    engine = InsightEngine(client, cfg["analytics"])
    insights = engine.generate_insights("demo_user", activity, events)

    print(f"\nInsights ({len(insights)}):")
    for insight in insights:
        print(f"  [{insight.priority:>6}] {insight.title}  (confidence {insight.confidence}%)")

    print("\nRecommendations:")
    for item in recommendations_from(insights):
        print(f"  * {item}")


if __name__ == "__main__":
    main()
