"""GoalCoach backend: REST API, LLM suggestion wrapper and insight analytics."""

from __future__ import annotations
