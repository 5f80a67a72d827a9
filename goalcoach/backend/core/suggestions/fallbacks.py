"""
Static suggestion data served when the LLM is unreachable or answers with
something unusable.

Every accessor returns a fresh deep copy so callers may mutate the result.
"""

from __future__ import annotations

import copy
from typing import Any

DEFAULT_GOAL_TYPE = "personal_development"
DEFAULT_MOOD = "neutral"

WELLNESS_CATEGORIES = ("fitness", "nutrition", "mindfulness", "productivity", "goals")

MOTIVATIONAL_QUOTE = "Every step forward is progress toward your dreams."
PROGRESS_INSIGHT = "Keep going! You're making great progress."

# goal type → either a flat prompt list or a mood → prompt list mapping
JOURNAL_PROMPTS: dict[str, Any] = {
    "personal_development": {
        "positive": [
            "What strength did I discover about myself this week?",
            "How can I build on today's positive momentum?",
            "What new skill would bring me joy to develop?",
            "Who in my life inspires me to grow, and why?",
            "What would I do if I knew I couldn't fail?",
        ],
        "neutral": [
            "What small action can I take today to move closer to my goals?",
            "What am I most grateful for in my journey so far?",
            "What challenge am I currently facing, and how can I approach it differently?",
            "What would I tell my past self about pursuing goals?",
            "What success, no matter how small, can I celebrate today?",
        ],
        "reflective": [
            "What patterns do I notice in my daily habits?",
            "When do I feel most authentic and true to myself?",
            "What fears are holding me back from taking action?",
            "How have my priorities shifted in the past month?",
            "What would my ideal day look like, and why?",
        ],
    },
    "career": [
        "What skills am I developing that excite me most?",
        "How can I add more value in my current role?",
        "What would my dream career look like in 5 years?",
        "Who are the mentors or role models I admire?",
        "What project would I start if resources weren't a constraint?",
    ],
    "health": [
        "How did my body feel today, and what is it telling me?",
        "What healthy habit can I start with just 5 minutes a day?",
        "What foods make me feel energized and focused?",
        "How does movement change my mood and mindset?",
        "What does self-care look like for me right now?",
    ],
}

CORE_VALUES_EXERCISE: dict[str, Any] = {
    "exercise": (
        "Reflect on moments when you felt most fulfilled and authentic. Think about "
        "times when you were proud of your decisions or actions. These moments often "
        "reveal your core values."
    ),
    "questions": [
        "When do you feel most like yourself?",
        "What principles would you never compromise on?",
        "What makes you feel proud of your actions?",
        "What do you stand for when no one is watching?",
        "What legacy do you want to leave behind?",
    ],
    "values": [
        "Authenticity", "Compassion", "Growth", "Family", "Adventure",
        "Creativity", "Justice", "Security", "Freedom", "Excellence",
        "Connection", "Wisdom", "Courage", "Balance", "Service",
        "Innovation", "Integrity", "Joy", "Peace", "Achievement",
    ],
}

FITNESS_PLAN: dict[str, Any] = {
    "workoutPlan": [
        {
            "day": "Monday",
            "focus": "Upper Body",
            "exercises": [
                {"name": "Push-ups", "sets": 3, "reps": "8-12"},
                {"name": "Squats", "sets": 3, "reps": "10-15"},
                {"name": "Plank", "sets": 3, "duration": "30-60 seconds"},
            ],
        },
        {
            "day": "Wednesday",
            "focus": "Cardio",
            "exercises": [
                {"name": "Brisk Walking", "duration": "20-30 minutes"},
                {"name": "Jumping Jacks", "sets": 3, "reps": "20-30"},
            ],
        },
        {
            "day": "Friday",
            "focus": "Full Body",
            "exercises": [
                {"name": "Bodyweight Squats", "sets": 3, "reps": "10-15"},
                {"name": "Modified Push-ups", "sets": 3, "reps": "5-10"},
                {"name": "Mountain Climbers", "sets": 3, "reps": "10-20"},
            ],
        },
    ],
    "nutritionTips": [
        "Stay hydrated with at least 8 glasses of water daily",
        "Include protein in every meal to support muscle recovery",
        "Eat a variety of colorful fruits and vegetables",
        "Plan your meals ahead to avoid unhealthy choices",
        "Listen to your body and eat when hungry, stop when satisfied",
    ],
}

WELLNESS_SUGGESTIONS: dict[str, Any] = {
    "suggestions": [
        {
            "category": "fitness",
            "title": "Start Your Day with Movement",
            "description": "Begin each morning with 10 minutes of light exercise to boost energy and mood.",
            "actionSteps": [
                "Set alarm 10 minutes earlier",
                "Choose 3-4 simple exercises (jumping jacks, stretches, push-ups)",
                "Do them right after waking up",
                "Track your energy levels throughout the day",
            ],
            "priority": "high",
            "timeToComplete": "10 minutes daily",
            "difficulty": "easy",
        },
        {
            "category": "nutrition",
            "title": "Hydration Foundation",
            "description": "Establish a consistent water intake routine to improve energy and focus.",
            "actionSteps": [
                "Fill a large water bottle each morning",
                "Drink a glass before each meal",
                "Set hourly reminders on your phone",
                "Track your intake for one week",
            ],
            "priority": "high",
            "timeToComplete": "Throughout the day",
            "difficulty": "easy",
        },
        {
            "category": "mindfulness",
            "title": "5-Minute Breathing Reset",
            "description": "Use simple breathing techniques to manage stress and improve focus.",
            "actionSteps": [
                "Find a quiet spot",
                "Breathe in for 4 counts, hold for 4, exhale for 6",
                "Repeat for 5 minutes",
                "Use during stressful moments",
            ],
            "priority": "medium",
            "timeToComplete": "5 minutes",
            "difficulty": "easy",
        },
        {
            "category": "productivity",
            "title": "Time Blocking Basics",
            "description": "Organize your day with focused work blocks for better efficiency.",
            "actionSteps": [
                "List your top 3 priorities each morning",
                "Assign specific time blocks to each task",
                "Set timers for each block",
                "Take 5-minute breaks between blocks",
            ],
            "priority": "medium",
            "timeToComplete": "15 minutes planning",
            "difficulty": "medium",
        },
        {
            "category": "goals",
            "title": "Weekly Progress Review",
            "description": "Regular check-ins to stay aligned with your long-term objectives.",
            "actionSteps": [
                "Schedule 15 minutes every Sunday",
                "Review last week's accomplishments",
                "Identify what worked and what didn't",
                "Set 3 priorities for the upcoming week",
            ],
            "priority": "medium",
            "timeToComplete": "15 minutes weekly",
            "difficulty": "easy",
        },
    ],
    "personalizedMessage": (
        "These suggestions are designed to build sustainable wellness habits. Start with "
        "one or two that resonate most with you, then gradually add others as they become "
        "routine. Remember, small consistent actions create lasting transformation."
    ),
    "focusArea": "Building Sustainable Daily Habits",
}

INVESTMENT_TASKS: list[dict[str, Any]] = [
    {
        "title": "Calculate current financial position",
        "description": "Review bank statements, debts, and current investments to establish baseline",
        "priority": "high",
        "urgency": "urgent",
        "importance": "important",
        "estimatedHours": 2,
    },
    {
        "title": "Research investment account options",
        "description": "Compare 401k, IRA, Roth IRA options and employer matching programs",
        "priority": "medium",
        "urgency": "not_urgent",
        "importance": "important",
        "estimatedHours": 3,
    },
    {
        "title": "Set up automatic transfers",
        "description": "Configure monthly automatic transfers to retirement accounts",
        "priority": "medium",
        "urgency": "urgent",
        "importance": "not_important",
        "estimatedHours": 1,
    },
    {
        "title": "Meet with financial advisor",
        "description": "Schedule consultation to review investment strategy and allocations",
        "priority": "medium",
        "urgency": "not_urgent",
        "importance": "important",
        "estimatedHours": 2,
    },
    {
        "title": "Create monthly budget tracker",
        "description": "Set up spreadsheet or app to track income and expenses",
        "priority": "medium",
        "urgency": "not_urgent",
        "importance": "important",
        "estimatedHours": 1,
    },
    {
        "title": "Read investment newsletter",
        "description": "Subscribe to and read financial newsletters for market updates",
        "priority": "low",
        "urgency": "not_urgent",
        "importance": "not_important",
        "estimatedHours": 0.5,
    },
]

GENERIC_TASKS: list[dict[str, Any]] = [
    {
        "title": "Define specific milestones",
        "description": "Break down the main goal into smaller, measurable milestones",
        "priority": "high",
        "urgency": "urgent",
        "importance": "important",
        "estimatedHours": 1,
    },
    {
        "title": "Research best practices",
        "description": "Study successful strategies and methods related to your goal",
        "priority": "medium",
        "urgency": "not_urgent",
        "importance": "important",
        "estimatedHours": 2,
    },
    {
        "title": "Create action timeline",
        "description": "Set up a detailed timeline with deadlines for each milestone",
        "priority": "medium",
        "urgency": "urgent",
        "importance": "not_important",
        "estimatedHours": 1,
    },
    {
        "title": "Find accountability partner",
        "description": "Identify someone to help keep you motivated and on track",
        "priority": "medium",
        "urgency": "not_urgent",
        "importance": "important",
        "estimatedHours": 1,
    },
    {
        "title": "Set up progress tracking",
        "description": "Choose tools or methods to monitor your progress regularly",
        "priority": "medium",
        "urgency": "not_urgent",
        "importance": "important",
        "estimatedHours": 1,
    },
    {
        "title": "Join online community",
        "description": "Find forums or groups related to your goal for support and tips",
        "priority": "low",
        "urgency": "not_urgent",
        "importance": "not_important",
        "estimatedHours": 0.5,
    },
]

DEFAULT_CATEGORIES: list[dict[str, str]] = [
    {"name": "Health & Fitness", "icon": "💪", "color": "#10b981"},
    {"name": "Career & Education", "icon": "🎯", "color": "#3b82f6"},
    {"name": "Personal Development", "icon": "🌱", "color": "#8b5cf6"},
    {"name": "Relationships", "icon": "❤️", "color": "#ef4444"},
    {"name": "Finance", "icon": "💰", "color": "#f59e0b"},
    {"name": "Hobbies & Creativity", "icon": "🎨", "color": "#ec4899"},
]


def fallback_journal_prompts(goal_type: str | None = None, mood: str | None = None) -> list[str]:
    """
    Pick the static prompt set that best matches the goal type and mood.

    A goal type with mood-specific sets uses the set for ``mood``; a goal type
    with a single set uses it regardless of mood; anything else gets the
    neutral personal-development prompts.
    """
    prompts = JOURNAL_PROMPTS.get(goal_type or DEFAULT_GOAL_TYPE)
    if isinstance(prompts, dict) and mood in prompts:
        return list(prompts[mood])
    if isinstance(prompts, list):
        return list(prompts)
    return list(JOURNAL_PROMPTS[DEFAULT_GOAL_TYPE][DEFAULT_MOOD])


def fallback_core_values() -> dict[str, Any]:
    return copy.deepcopy(CORE_VALUES_EXERCISE)


def fallback_fitness_plan() -> dict[str, Any]:
    return copy.deepcopy(FITNESS_PLAN)


def fallback_wellness(categories: list[str] | None = None) -> dict[str, Any]:
    """Static wellness suggestions limited to ``categories`` (all when none match)."""
    result = copy.deepcopy(WELLNESS_SUGGESTIONS)
    if categories:
        wanted = {c.lower() for c in categories}
        selected = [s for s in result["suggestions"] if s["category"] in wanted]
        if selected:
            result["suggestions"] = selected
    return result


def fallback_tasks(goal_title: str) -> list[dict[str, Any]]:
    """Investment tasks for money goals, the generic breakdown otherwise."""
    title = goal_title.lower()
    if "invest" in title or "retirement" in title:
        return copy.deepcopy(INVESTMENT_TASKS)
    return copy.deepcopy(GENERIC_TASKS)


def default_categories() -> list[dict[str, str]]:
    return copy.deepcopy(DEFAULT_CATEGORIES)
