"""Coaching suggestions: LLM generator plus static fallbacks."""

from __future__ import annotations

from goalcoach.backend.core.suggestions.generator import (
    SuggestionGenerator,
    priority_for,
    quadrant_for,
)

__all__ = ["SuggestionGenerator", "priority_for", "quadrant_for"]
