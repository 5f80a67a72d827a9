"""
Insight Engine.

Turns a snapshot of a user's goal activity into dashboard insights:
1. Goal completion forecast (LLM)
2. Productivity pattern analysis (event histograms)
3. Task velocity
4. Habit consistency
5. Success factors (LLM)

The statistical analyses run locally with numpy; the two LLM-backed
analyses are skipped when the provider fails.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import numpy as np

from goalcoach.backend.core.analytics.records import (
    AnalyticsEvent,
    GoalRecord,
    HabitEntryRecord,
    HabitRecord,
    Insight,
    TaskRecord,
    UserActivity,
    as_utc,
)
from goalcoach.backend.core.llm.client import LLMClient, LLMError
from goalcoach.backend.core.llm.parsing import extract_json

logger = logging.getLogger(__name__)

# Sunday first, matching the dashboard's weekday axis
DAY_NAMES = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

DEFAULT_RECOMMENDATIONS = [
    "Keep up the great work on your goals!",
    "Consider setting a new challenging goal to maintain momentum.",
    "Review your completed goals to identify successful patterns.",
]

DEFAULT_SETTINGS: dict[str, Any] = {
    "min_events": 10,
    "min_completed_tasks": 5,
    "min_completed_goals": 2,
    "recent_days": 7,
    "window_days": 30,
}


def week_key(moment: datetime) -> tuple[int, int]:
    """(year, week) bucket where week counts whole 7-day spans since Jan 1."""
    start = datetime(moment.year, 1, 1, tzinfo=moment.tzinfo)
    return moment.year, (moment - start).days // 7


def _sunday_first_weekday(moment: datetime) -> int:
    return (moment.weekday() + 1) % 7


def _clamp_percent(value: Any, default: int) -> int:
    try:
        return int(min(max(float(value), 0.0), 100.0))
    except (TypeError, ValueError):
        return default


class InsightEngine:
    """
    Generate insights from user activity.

    Args:
        client: Completion client for the LLM-backed analyses
        settings: Thresholds from the ``analytics`` config section
        clock: Returns "now"; injectable for tests
    """

    def __init__(
        self,
        client: LLMClient,
        settings: dict[str, Any] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.client = client
        self.settings = {**DEFAULT_SETTINGS, **(settings or {})}
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def _now(self) -> datetime:
        return as_utc(self.clock())

    def _since(self, days: int) -> datetime:
        return self._now() - timedelta(days=days)

    def generate_insights(
        self,
        user_id: str,
        activity: UserActivity,
        events: list[AnalyticsEvent] | None = None,
    ) -> list[Insight]:
        """
        Run every analysis and collect the insights that apply.

        An analysis without enough data returns None and is skipped, as is
        one that fails unexpectedly (the failure is logged).
        """
        events = events or []
        analyses: list[tuple[str, Callable[[], Insight | None]]] = [
            ("completion_prediction", lambda: self.predict_goal_completion(user_id, activity)),
            ("productivity_pattern", lambda: self.analyze_productivity_patterns(user_id, events)),
            ("task_velocity", lambda: self.analyze_task_velocity(user_id, activity.tasks, events)),
            (
                "habit_consistency",
                lambda: self.analyze_habit_consistency(user_id, activity.habits, activity.habit_entries),
            ),
            ("success_factors", lambda: self.identify_success_factors(user_id, activity)),
        ]

        insights = []
        for name, analysis in analyses:
            try:
                insight = analysis()
            except Exception:
                logger.exception("Insight analysis %s failed", name)
                continue
            if insight is not None:
                insights.append(insight)

        logger.info("Generated %d insights for user %s", len(insights), user_id)
        return insights

    # ── 1. Goal completion forecast ───────────────────────────────────────

    def predict_goal_completion(self, user_id: str, activity: UserActivity) -> Insight | None:
        goals = activity.goals
        active = [g for g in goals if g.status == "active"]
        if not active:
            return None

        recent_cutoff = self._since(self.settings["recent_days"])
        summary = {
            "totalGoals": len(goals),
            "activeGoals": len(active),
            "completedGoals": sum(1 for g in goals if g.status == "completed"),
            "avgProgress": round(float(np.mean([g.progress for g in active])), 1),
            "totalTasks": len(activity.tasks),
            "completedTasks": sum(1 for t in activity.tasks if t.is_completed),
            "recentProgress": sum(
                1 for p in activity.progress_entries if as_utc(p.date) > recent_cutoff
            ),
        }

        prompt = f"""Analyze the following goal achievement data and provide insights:

User Data:
- Total Goals: {summary['totalGoals']}
- Active Goals: {summary['activeGoals']}
- Completed Goals: {summary['completedGoals']}
- Average Progress: {summary['avgProgress']:.1f}%
- Total Tasks: {summary['totalTasks']}
- Completed Tasks: {summary['completedTasks']}
- Progress Entries (last {self.settings['recent_days']} days): {summary['recentProgress']}

Respond with a JSON object with:
1. completion_likelihood (0-100): likelihood of completing current goals
2. confidence (0-100): confidence in this prediction
3. key_factors: array of factors affecting completion
4. recommendations: array of specific actionable recommendations
5. risk_areas: array of areas where the user might struggle"""

        try:
            analysis = extract_json(self.client.complete(prompt, json_mode=True))
            if not isinstance(analysis, dict) or "completion_likelihood" not in analysis:
                raise ValueError("completion_likelihood missing")
        except (LLMError, ValueError) as exc:
            logger.warning("Goal completion prediction unavailable: %s", exc)
            return None

        likelihood = _clamp_percent(analysis["completion_likelihood"], 0)
        if likelihood < 60:
            priority = "high"
        elif likelihood < 80:
            priority = "medium"
        else:
            priority = "low"

        return Insight(
            user_id=user_id,
            insight_type="completion_prediction",
            title=f"Goal Completion Forecast: {likelihood}% Success Rate",
            description=(
                f"Based on your current progress patterns, you have a {likelihood}% likelihood "
                "of completing your active goals on time."
            ),
            confidence=_clamp_percent(analysis.get("confidence"), 75),
            priority=priority,
            action_items=[str(r) for r in analysis.get("recommendations") or []],
            data={
                "prediction": likelihood,
                "keyFactors": analysis.get("key_factors") or [],
                "riskAreas": analysis.get("risk_areas") or [],
                "analysisData": summary,
            },
        )

    # ── 2. Productivity patterns ──────────────────────────────────────────

    def analyze_productivity_patterns(
        self,
        user_id: str,
        events: list[AnalyticsEvent],
    ) -> Insight | None:
        if len(events) < self.settings["min_events"]:
            return None

        stamps = [as_utc(e.timestamp) for e in events]
        hourly = np.bincount([s.hour for s in stamps], minlength=24)
        daily = np.bincount([_sunday_first_weekday(s) for s in stamps], minlength=7)
        weekly = Counter(week_key(s) for s in stamps)

        peak_hour = int(np.argmax(hourly))
        peak_day = DAY_NAMES[int(np.argmax(daily))]

        recent_weeks = sorted(weekly)[-4:]
        weekly_trend = [weekly[w] for w in recent_weeks]
        if len(weekly_trend) < 2 or weekly_trend[-1] == weekly_trend[0]:
            trend = "stable"
        elif weekly_trend[-1] > weekly_trend[0]:
            trend = "increasing"
        else:
            trend = "decreasing"

        if trend == "decreasing":
            momentum = "Consider adjusting your schedule to boost productivity"
        else:
            momentum = "Keep up the great momentum!"

        return Insight(
            user_id=user_id,
            insight_type="productivity_pattern",
            title=f"Peak Productivity: {peak_hour}:00 on {peak_day}s",
            description=(
                f"Your most productive time is {peak_hour}:00 on {peak_day}s. "
                f"Your activity trend is {trend} over the past month."
            ),
            confidence=85,
            priority="medium",
            action_items=[
                f"Schedule important tasks around {peak_hour}:00 when you're most active",
                f"Block {peak_day} mornings for high-priority goal work",
                momentum,
            ],
            data={
                "peakHour": peak_hour,
                "peakDay": peak_day,
                "hourlyPattern": hourly.tolist(),
                "dailyPattern": daily.tolist(),
                "weeklyTrend": weekly_trend,
                "trendDirection": trend,
            },
        )

    # ── 3. Task velocity ──────────────────────────────────────────────────

    def analyze_task_velocity(
        self,
        user_id: str,
        tasks: list[TaskRecord],
        events: list[AnalyticsEvent],
    ) -> Insight | None:
        completed = [t for t in tasks if t.is_completed]
        if len(completed) < self.settings["min_completed_tasks"]:
            return None

        window_days = self.settings["window_days"]
        cutoff = self._since(window_days)
        completion_events = [e for e in events if e.event_type == "task_completed"]
        if completion_events:
            recent = sum(1 for e in completion_events if as_utc(e.timestamp) > cutoff)
        else:
            # No tracked events yet; fall back to the tasks' own completion times
            recent = sum(1 for t in completed if t.completed_at and as_utc(t.completed_at) > cutoff)

        weeks = max(window_days // 7, 1)
        velocity = round(recent / weeks, 1)
        open_tasks = len(tasks) - len(completed)
        est_weeks = round(open_tasks / velocity, 1) if velocity > 0 else None

        priority = "medium"
        if velocity < 2:
            priority = "high"
            recommendations = [
                "Your task completion rate is below optimal. Consider breaking larger tasks into smaller ones.",
                "Set daily task completion goals to improve velocity.",
                "Review and remove any blocked or unnecessary tasks.",
            ]
        elif velocity > 5:
            recommendations = [
                "Excellent task completion velocity! Consider taking on more challenging goals.",
                "Maintain your momentum by celebrating small wins.",
                "Share your productivity techniques with others.",
            ]
        else:
            recommendations = [
                "Good task completion pace. Consider optimizing your workflow.",
                "Track time spent on tasks to identify efficiency improvements.",
                "Batch similar tasks together for better focus.",
            ]

        description = f"You complete an average of {velocity} tasks per week."
        if est_weeks is not None:
            description += f" At this pace, you'll finish your current tasks in {est_weeks} weeks."

        return Insight(
            user_id=user_id,
            insight_type="task_velocity",
            title=f"Task Velocity: {velocity} tasks/week",
            description=description,
            confidence=80,
            priority=priority,
            action_items=recommendations,
            data={
                "currentVelocity": velocity,
                "totalCompletedTasks": len(completed),
                "activeTasks": open_tasks,
                "estimatedCompletion": est_weeks,
            },
        )

    # ── 4. Habit consistency ──────────────────────────────────────────────

    def analyze_habit_consistency(
        self,
        user_id: str,
        habits: list[HabitRecord],
        entries: list[HabitEntryRecord],
    ) -> Insight | None:
        if not habits:
            return None

        cutoff = self._since(self.settings["window_days"])
        scores = []
        for habit in habits:
            recent = [
                e for e in entries if e.habit_id == habit.id and as_utc(e.date) > cutoff
            ]
            rate = (sum(1 for e in recent if e.completed) / len(recent) * 100) if recent else 0.0
            scores.append(
                {"habit": habit.name, "completionRate": round(rate, 1), "streak": habit.current_streak}
            )

        average = float(np.mean([s["completionRate"] for s in scores]))
        strong = sum(1 for s in scores if s["completionRate"] > 80)
        weak = sum(1 for s in scores if s["completionRate"] < 50)

        description = f"Your overall habit consistency is {average:.0f}%. "
        priority = "medium"
        if average > 80:
            description += "Excellent consistency across your habits!"
            recommendations = [
                "Outstanding habit consistency! Consider adding new challenging habits.",
                "Share your success strategies with others.",
                "Use your strong habits as anchors for new ones.",
            ]
        elif average < 50:
            priority = "high"
            description += "There's room for improvement in your habit consistency."
            recommendations = [
                "Focus on building one habit at a time to improve consistency.",
                "Set up environmental cues to trigger habit execution.",
                "Start with smaller, easier versions of your habits.",
                "Track your habits daily to maintain awareness.",
            ]
        else:
            description += "Solid foundation with a few habits to strengthen."
            recommendations = [
                "Good habit consistency overall. Focus on strengthening weaker habits.",
                "Consider habit stacking - linking new habits to existing strong ones.",
                "Review and adjust habits that consistently fall below 70%.",
            ]

        return Insight(
            user_id=user_id,
            insight_type="habit_consistency",
            title=f"Habit Consistency: {average:.0f}% Average",
            description=description,
            confidence=90,
            priority=priority,
            action_items=recommendations,
            data={
                "averageConsistency": round(average, 1),
                "habitScores": scores,
                "strongHabits": strong,
                "weakHabits": weak,
            },
        )

    # ── 5. Success factors ────────────────────────────────────────────────

    def identify_success_factors(self, user_id: str, activity: UserActivity) -> Insight | None:
        goals = activity.goals
        completed = [g for g in goals if g.status == "completed"]
        if len(completed) < self.settings["min_completed_goals"]:
            return None

        tasks = activity.tasks
        metrics = {
            "completedGoals": len(completed),
            "totalGoals": len(goals),
            "completionRate": round(len(completed) / len(goals) * 100, 1),
            "avgDaysToComplete": round(self._average_completion_days(completed), 1),
            "topCategories": self._top_categories(completed),
            "taskCompletionRate": (
                round(sum(1 for t in tasks if t.is_completed) / len(tasks) * 100, 1) if tasks else 0.0
            ),
            "activeHabits": len(activity.habits),
        }

        prompt = f"""Analyze this user's goal achievement data to identify success factors:

Success Metrics:
- Goal Completion Rate: {metrics['completionRate']}%
- Completed Goals: {metrics['completedGoals']}
- Average Days to Complete: {metrics['avgDaysToComplete']}
- Task Completion Rate: {metrics['taskCompletionRate']}%
- Active Habits: {metrics['activeHabits']}
- Top Goal Categories: {', '.join(metrics['topCategories']) or 'none'}

Respond with a JSON object with:
1. key_success_factors: top 3-5 factors contributing to success
2. strengths: the user's main strengths in goal achievement
3. optimization_areas: areas for improvement
4. strategic_recommendations: high-level strategic advice
5. confidence: confidence in this analysis (0-100)"""

        try:
            analysis = extract_json(self.client.complete(prompt, json_mode=True))
            if not isinstance(analysis, dict):
                raise ValueError("Expected an object")
        except (LLMError, ValueError) as exc:
            logger.warning("Success factor analysis unavailable: %s", exc)
            return None

        return Insight(
            user_id=user_id,
            insight_type="success_factors",
            title=f"Success Analysis: {metrics['completionRate']}% Goal Completion Rate",
            description=(
                f"Analysis of your {len(completed)} completed goals reveals key patterns "
                "for continued success."
            ),
            confidence=_clamp_percent(analysis.get("confidence"), 85),
            priority="medium",
            action_items=[str(r) for r in analysis.get("strategic_recommendations") or []],
            data={
                "successFactors": analysis.get("key_success_factors") or [],
                "strengths": analysis.get("strengths") or [],
                "optimizationAreas": analysis.get("optimization_areas") or [],
                "metrics": metrics,
            },
        )

    @staticmethod
    def _average_completion_days(goals: list[GoalRecord]) -> float:
        durations = [
            (as_utc(g.completed_at) - as_utc(g.created_at)).total_seconds() / 86400
            for g in goals
            if g.completed_at and g.created_at
        ]
        return float(np.mean(durations)) if durations else 0.0

    @staticmethod
    def _top_categories(goals: list[GoalRecord], n: int = 3) -> list[str]:
        counts = Counter(
            str(g.category_id) if g.category_id is not None else "Uncategorized" for g in goals
        )
        return [category for category, _ in counts.most_common(n)]


def recommendations_from(insights: list[Insight], limit: int = 5) -> list[str]:
    """
    Top action items across active high-priority insights.

    Takes the first two action items of each such insight, up to ``limit``;
    returns encouraging defaults when nothing urgent stands out.
    """
    picks: list[str] = []
    for insight in insights:
        if insight.priority == "high" and insight.is_active:
            picks.extend(insight.action_items[:2])
    if not picks:
        return list(DEFAULT_RECOMMENDATIONS)
    return picks[:limit]
