"""Services package – re-exports the service modules used by the router."""

from __future__ import annotations

from goalcoach.backend.services import insights, suggestions

__all__ = ["insights", "suggestions"]
