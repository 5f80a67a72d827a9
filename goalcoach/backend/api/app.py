"""FastAPI application factory.

Instantiate with:
    uvicorn goalcoach.backend.api.app:app --reload --port 8000
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from goalcoach import __version__
from goalcoach.backend.api.router import router
from goalcoach.backend.core.analytics import InsightEngine, InsightStore
from goalcoach.backend.core.llm import LLMClient, create_client
from goalcoach.backend.core.suggestions import SuggestionGenerator
from goalcoach.backend.core.utils.config import resolve_config

logger = logging.getLogger(__name__)


def create_app(config: dict[str, Any] | None = None, client: LLMClient | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Resolved configuration; defaults plus environment when omitted
        client: LLM client to use instead of the configured provider
    """
    cfg = config if config is not None else resolve_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Build the per-process generator, insight engine and store."""
        llm = client if client is not None else create_client(cfg["llm"])
        app.state.config = cfg
        app.state.generator = SuggestionGenerator(llm)
        app.state.engine = InsightEngine(llm, cfg.get("analytics"))
        app.state.store = InsightStore()
        logger.info("Backend ready – using %s model %s", llm.provider, llm.model)
        yield

    application = FastAPI(
        title="GoalCoach API",
        version=__version__,
        description="AI coaching suggestions and goal analytics backend",
        lifespan=lifespan,
    )

    # ── CORS ───────────────────────────────────────────────────────────────
    origins = str(cfg["server"].get("cors_origins", ""))
    application.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Error bodies use {"message": ...} ──────────────────────────────────
    application.add_exception_handler(RequestValidationError, _validation_error_handler)
    application.add_exception_handler(StarletteHTTPException, _http_error_handler)

    # ── Register all API routes under /api ─────────────────────────────────
    application.include_router(router, prefix="/api")

    # ── Suppress noisy access-log lines for health polls ───────────────────
    _install_access_log_filter()

    return application


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part not in ("body", "query")),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(status_code=400, content={"message": "Invalid request", "errors": errors})


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


class _QuietPollFilter(logging.Filter):
    """Drop uvicorn access-log records for /api/health."""

    _NOISY = ("/api/health",)

    def filter(self, record: logging.LogRecord) -> bool:
        msg = record.getMessage()
        return not any(path in msg for path in self._NOISY)


def _install_access_log_filter() -> None:
    """Attach the filter to uvicorn's access logger (if it exists)."""
    uvicorn_access = logging.getLogger("uvicorn.access")
    if not any(isinstance(f, _QuietPollFilter) for f in uvicorn_access.filters):
        uvicorn_access.addFilter(_QuietPollFilter())


# Module-level instance used by uvicorn.
app = create_app()
