"""
Helpers for turning free-form model answers into Python data.
"""

from __future__ import annotations

import json
import re
from typing import Any

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)```", re.DOTALL | re.IGNORECASE)
_BULLET_RE = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s*")


def extract_json(text: str) -> Any:
    """
    Parse the JSON payload of a model answer.

    Accepts bare JSON, JSON wrapped in a Markdown code fence, or JSON
    surrounded by a sentence of prose.

    Args:
        text: Raw answer text

    Returns:
        The decoded object or array

    Raises:
        ValueError: If no JSON value can be decoded
    """
    if not text or not text.strip():
        raise ValueError("Empty model answer")

    candidates = [text.strip()]
    fenced = _FENCE_RE.search(text)
    if fenced:
        candidates.insert(0, fenced.group(1).strip())

    # Outermost object or array embedded in prose
    for opener, closer in (("{", "}"), ("[", "]")):
        start, end = text.find(opener), text.rfind(closer)
        if start != -1 and end > start:
            candidates.append(text[start : end + 1])

    for candidate in candidates:
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue
    raise ValueError("Model answer does not contain valid JSON")


def split_lines(text: str, limit: int = 5) -> list[str]:
    """
    Split a plain-text list answer into items.

    Blank lines are dropped; bullets, numbering and wrapping quotes are
    stripped.

    Args:
        text: Raw answer text
        limit: Maximum number of items to return
    """
    items = []
    for line in text.splitlines():
        cleaned = _BULLET_RE.sub("", line).strip().strip('"').strip()
        if cleaned:
            items.append(cleaned)
    return items[:limit]


def coerce_string_list(value: Any, key: str | None = None) -> list[str]:
    """
    Normalise a list answer that may arrive wrapped in an object.

    ``["a", "b"]`` and ``{"prompts": ["a", "b"]}`` (with ``key="prompts"``)
    both yield ``["a", "b"]``.

    Raises:
        ValueError: If the value holds no list of strings
    """
    if isinstance(value, dict) and key is not None:
        value = value.get(key)
    if not isinstance(value, list):
        raise ValueError(f"Expected a list{f' under {key!r}' if key else ''}")
    items = [str(item).strip() for item in value if isinstance(item, str) and item.strip()]
    if not items:
        raise ValueError("List contains no usable strings")
    return items
