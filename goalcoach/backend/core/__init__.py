"""Domain logic with no FastAPI imports."""

from __future__ import annotations
