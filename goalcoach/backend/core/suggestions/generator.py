"""
LLM-backed suggestion generator.

Each public method makes one sequential completion call, parses the JSON
answer, checks its shape and falls back to the static data in
:mod:`goalcoach.backend.core.suggestions.fallbacks` on any failure.
There is no retry policy: a failed call is logged and the user gets the
static suggestion immediately.
"""

from __future__ import annotations

import logging
from typing import Any

from goalcoach.backend.core.llm.client import LLMClient, LLMError
from goalcoach.backend.core.llm.parsing import coerce_string_list, extract_json, split_lines
from goalcoach.backend.core.suggestions import fallbacks

logger = logging.getLogger(__name__)

URGENCY_LEVELS = ("urgent", "not_urgent")
IMPORTANCE_LEVELS = ("important", "not_important")
PRIORITY_LEVELS = ("high", "medium", "low")

_QUADRANTS = {
    ("urgent", "important"): "do_first",
    ("not_urgent", "important"): "schedule",
    ("urgent", "not_important"): "delegate",
    ("not_urgent", "not_important"): "eliminate",
}
_QUADRANT_PRIORITY = {
    "do_first": "high",
    "schedule": "medium",
    "delegate": "medium",
    "eliminate": "low",
}

JOURNAL_SYSTEM = (
    "You are a thoughtful journaling coach who helps people reflect on their goals and "
    "personal growth. Write inspiring prompts that encourage deep reflection, goal-setting "
    "and personal development without feeling overwhelming."
)
CORE_VALUES_SYSTEM = (
    "You are a personal development coach specializing in values clarification. Help users "
    "discover their core values through thoughtful exercises and reflection questions."
)
FITNESS_SYSTEM = (
    "You are a certified fitness trainer and nutritionist. Create personalized, safe and "
    "effective fitness recommendations."
)
WELLNESS_SYSTEM = (
    "You are a comprehensive wellness coach and life strategist. Create personalized, "
    "actionable wellness suggestions across several areas of life."
)
GOAL_SYSTEM = (
    "You are a goal-setting expert. Every goal you suggest is Specific, Measurable, "
    "Achievable, Relevant and Time-bound."
)
PROGRESS_SYSTEM = (
    "You are a supportive goal coach. Provide encouraging and actionable insights based on "
    "goal progress."
)
TASK_SYSTEM = """You are a productivity expert specializing in the Eisenhower Matrix.
Break goals down into actionable tasks categorized by urgency and importance.

Urgency: "urgent" (time-sensitive, has a deadline) or "not_urgent".
Importance: "important" (directly drives the goal) or "not_important".
Priority: "high" for urgent+important, "medium" for important+not urgent or
urgent+not important, "low" for the rest.

Respond with JSON in exactly this format:
{"tasks": [{"title": "...", "description": "...", "priority": "high|medium|low",
"urgency": "urgent|not_urgent", "importance": "important|not_important",
"estimatedHours": 1.5}]}"""


def quadrant_for(urgency: str, importance: str) -> str:
    """Eisenhower quadrant for an urgency/importance pair."""
    try:
        return _QUADRANTS[(urgency, importance)]
    except (KeyError, TypeError):
        raise ValueError(f"Invalid urgency/importance: {urgency!r}/{importance!r}") from None


def priority_for(urgency: str, importance: str) -> str:
    """Priority implied by the Eisenhower quadrant."""
    return _QUADRANT_PRIORITY[quadrant_for(urgency, importance)]


def _normalize_task(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, dict):
        raise ValueError("Task must be an object")
    title = str(raw.get("title", "")).strip()
    if not title:
        raise ValueError("Task has no title")
    urgency = raw.get("urgency")
    importance = raw.get("importance")
    quadrant = quadrant_for(urgency, importance)

    priority = raw.get("priority")
    if priority not in PRIORITY_LEVELS:
        priority = _QUADRANT_PRIORITY[quadrant]

    hours = raw.get("estimatedHours", raw.get("estimated_hours", 1))
    try:
        hours = max(float(hours), 0.0)
    except (TypeError, ValueError):
        hours = 1.0

    return {
        "title": title,
        "description": str(raw.get("description") or "").strip(),
        "priority": priority,
        "urgency": urgency,
        "importance": importance,
        "estimatedHours": hours,
    }


def _require_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Missing text field {key!r}")
    return value.strip()


def _text_or(data: dict, key: str, default: str) -> str:
    """``data[key]`` when it is non-blank text, else ``default``."""
    value = data.get(key)
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


class SuggestionGenerator:
    """
    Generate coaching suggestions through an LLM with static fallbacks.

    Args:
        client: Completion client used for every request
    """

    def __init__(self, client: LLMClient):
        self.client = client

    def _ask_json(self, prompt: str, *, system: str | None = None, max_tokens: int | None = None) -> Any:
        text = self.client.complete(prompt, system=system, max_tokens=max_tokens, json_mode=True)
        return extract_json(text)

    # ── Journal prompts ───────────────────────────────────────────────────

    def journal_prompts(self, goal_type: str | None = None, mood: str | None = None) -> list[str]:
        """
        Five journal prompts for the given goal type and mood.

        A non-JSON answer is split into lines before falling back to the
        static prompt sets.
        """
        topic = (goal_type or fallbacks.DEFAULT_GOAL_TYPE).replace("_", " ")
        feeling = mood or "motivated"
        prompt = (
            f"Generate 5 journal prompts for someone working on {topic} goals who is feeling "
            f"{feeling}. Make them thought-provoking but approachable. "
            'Respond with JSON: {"prompts": ["prompt1", "prompt2", "prompt3", "prompt4", "prompt5"]}'
        )
        try:
            text = self.client.complete(prompt, system=JOURNAL_SYSTEM, json_mode=True)
        except LLMError as exc:
            logger.warning("Journal prompt generation failed, using fallback: %s", exc)
            return fallbacks.fallback_journal_prompts(goal_type, mood)

        try:
            data = extract_json(text)
        except ValueError:
            lines = split_lines(text, limit=5)
            if lines:
                logger.debug("Journal prompts were not JSON; using %d text lines", len(lines))
                return lines
            logger.warning("Journal prompt answer was empty, using fallback")
            return fallbacks.fallback_journal_prompts(goal_type, mood)

        try:
            return coerce_string_list(data, "prompts")[:5]
        except ValueError as exc:
            logger.warning("Journal prompt answer had an unexpected shape, using fallback: %s", exc)
            return fallbacks.fallback_journal_prompts(goal_type, mood)

    # ── Core values ───────────────────────────────────────────────────────

    def core_values_exercise(self) -> dict[str, Any]:
        """Values discovery exercise: description, 5 questions, 20 values."""
        prompt = (
            "Create a core values discovery exercise with a brief description of the exercise, "
            "5 reflection questions and a list of 20 common core values to consider. "
            'Respond with JSON: {"exercise": "...", "questions": ["..."], "values": ["..."]}'
        )
        try:
            data = self._ask_json(prompt, system=CORE_VALUES_SYSTEM)
            if not isinstance(data, dict):
                raise ValueError("Expected an object")
            return {
                "exercise": _require_str(data, "exercise"),
                "questions": coerce_string_list(data, "questions"),
                "values": coerce_string_list(data, "values"),
            }
        except (LLMError, ValueError) as exc:
            logger.warning("Core values exercise generation failed, using fallback: %s", exc)
            return fallbacks.fallback_core_values()

    # ── Fitness ───────────────────────────────────────────────────────────

    def fitness_recommendations(
        self,
        fitness_level: str,
        goals: list[str],
        time_available: int,
    ) -> dict[str, Any]:
        """
        Weekly workout plan and nutrition tips.

        Args:
            fitness_level: beginner, intermediate or advanced
            goals: Fitness goals such as "build strength"
            time_available: Minutes available per workout
        """
        goal_text = ", ".join(goals) if goals else "general fitness"
        prompt = (
            f"Create a fitness plan for someone at {fitness_level} level with goals: {goal_text}. "
            f"They have {time_available} minutes per workout. Include a week's workout plan with "
            "exercises, sets and reps, and 5 nutrition tips. Respond with JSON: "
            '{"workoutPlan": [{"day": "Monday", "focus": "Upper Body", "exercises": '
            '[{"name": "Push-ups", "sets": 3, "reps": "10-12"}]}], "nutritionTips": ["tip"]}'
        )
        try:
            data = self._ask_json(prompt, system=FITNESS_SYSTEM)
            if not isinstance(data, dict):
                raise ValueError("Expected an object")
            plan = data.get("workoutPlan")
            if not isinstance(plan, list) or not plan or not all(isinstance(d, dict) for d in plan):
                raise ValueError("workoutPlan must be a non-empty list of days")
            return {
                "workoutPlan": plan,
                "nutritionTips": coerce_string_list(data, "nutritionTips"),
            }
        except (LLMError, ValueError) as exc:
            logger.warning("Fitness recommendation generation failed, using fallback: %s", exc)
            return fallbacks.fallback_fitness_plan()

    # ── Wellness ──────────────────────────────────────────────────────────

    def wellness_suggestions(self, categories: list[str] | None = None) -> dict[str, Any]:
        """Five wellness suggestions spread over ``categories``."""
        categories = list(categories or fallbacks.WELLNESS_CATEGORIES)
        prompt = (
            f"Generate 5 wellness suggestions covering these categories: {', '.join(categories)}. "
            "Make them actionable, personalized and varied in difficulty, with specific time "
            "estimates and clear action steps. Respond with JSON: "
            '{"suggestions": [{"category": "...", "title": "...", "description": "...", '
            '"actionSteps": ["..."], "priority": "high|medium|low", "timeToComplete": "...", '
            '"difficulty": "easy|medium|hard"}], "personalizedMessage": "...", "focusArea": "..."}'
        )
        try:
            data = self._ask_json(prompt, system=WELLNESS_SYSTEM)
            if not isinstance(data, dict):
                raise ValueError("Expected an object")
            suggestions = data.get("suggestions")
            if not isinstance(suggestions, list) or not suggestions:
                raise ValueError("suggestions must be a non-empty list")
            for item in suggestions:
                if not isinstance(item, dict):
                    raise ValueError("Suggestion must be an object")
                _require_str(item, "title")
                _require_str(item, "description")
            fallback = fallbacks.WELLNESS_SUGGESTIONS
            return {
                "suggestions": suggestions,
                "personalizedMessage": _text_or(data, "personalizedMessage", fallback["personalizedMessage"]),
                "focusArea": _text_or(data, "focusArea", fallback["focusArea"]),
            }
        except (LLMError, ValueError) as exc:
            logger.warning("Wellness suggestion generation failed, using fallback: %s", exc)
            return fallbacks.fallback_wellness(categories)

    # ── Goals and progress ────────────────────────────────────────────────

    def motivational_quote(self, goal_title: str | None = None) -> str:
        if goal_title:
            prompt = (
                f'Generate an inspiring and motivational quote related to achieving the goal: "{goal_title}". '
                "Make it personal, encouraging and actionable. Keep it under 100 characters. "
                "Reply with the quote only."
            )
        else:
            prompt = (
                "Generate a short, inspiring motivational quote about goal achievement and personal "
                "growth. Keep it under 100 characters. Reply with the quote only."
            )
        try:
            quote = self.client.complete(prompt, max_tokens=100).strip().strip('"').strip()
        except LLMError as exc:
            logger.warning("Motivational quote generation failed, using fallback: %s", exc)
            return fallbacks.MOTIVATIONAL_QUOTE
        return quote or fallbacks.MOTIVATIONAL_QUOTE

    def goal_suggestions(self, idea: str) -> list[str]:
        """Three SMART goals for a free-form idea; empty when the LLM fails."""
        prompt = (
            f'Based on this idea: "{idea}", suggest 3 SMART goals that would help achieve it. '
            'Respond with JSON: {"suggestions": ["goal1", "goal2", "goal3"]}'
        )
        try:
            return coerce_string_list(self._ask_json(prompt, system=GOAL_SYSTEM), "suggestions")[:3]
        except (LLMError, ValueError) as exc:
            logger.warning("Goal suggestion generation failed: %s", exc)
            return []

    def progress_insight(self, goal_title: str, progress_percentage: float) -> str:
        pct = f"{progress_percentage:g}"
        prompt = (
            f'Goal: "{goal_title}" is {pct}% complete. Provide a brief, encouraging insight or '
            "next step suggestion (max 150 characters)."
        )
        try:
            insight = self.client.complete(prompt, system=PROGRESS_SYSTEM, max_tokens=80).strip()
        except LLMError as exc:
            logger.warning("Progress insight generation failed, using fallback: %s", exc)
            return fallbacks.PROGRESS_INSIGHT
        return insight or fallbacks.PROGRESS_INSIGHT

    def task_suggestions(self, goal_title: str, goal_description: str = "") -> list[dict[str, Any]]:
        """
        Break a goal into 6-8 Eisenhower-matrix tasks.

        Malformed tasks are dropped; if none survive the static breakdown for
        the goal is returned instead.
        """
        prompt = (
            f'Goal: "{goal_title}"\nDescription: "{goal_description}"\n\n'
            "Generate 6-8 specific, actionable tasks to achieve this goal. Include a mix of "
            "urgent/important, important/not-urgent and other combinations."
        )
        try:
            data = self._ask_json(prompt, system=TASK_SYSTEM)
        except (LLMError, ValueError) as exc:
            logger.warning("Task suggestion generation failed, using fallback: %s", exc)
            return fallbacks.fallback_tasks(goal_title)

        raw_tasks = data.get("tasks") if isinstance(data, dict) else data
        tasks = []
        for raw in raw_tasks if isinstance(raw_tasks, list) else []:
            try:
                tasks.append(_normalize_task(raw))
            except ValueError as exc:
                logger.debug("Dropping malformed task suggestion: %s", exc)

        if not tasks:
            logger.warning("No usable task suggestions for %r, using fallback", goal_title)
            return fallbacks.fallback_tasks(goal_title)
        return tasks
