"""FastAPI application factory (create_app)."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

import structlog
from fastapi import FastAPI, Request
from starlette.responses import Response

from vodarr.infrastructure.config import AppConfig
from vodarr.interfaces.app_state import AppState
from vodarr.interfaces.composition import lifespan

log = structlog.get_logger(__name__)


def create_app(config: AppConfig) -> FastAPI:
    """Create FastAPI app: configuration only, no resource initialization.

    Resources (HTTP client, site registry, use cases) are created in lifespan().
    """
    app = FastAPI(
        title="vodarr",
        description="Aggregated search across video-index APIs",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.state = AppState()
    app.state.config = config

    from vodarr.interfaces.api.search.router import router as search_router

    app.include_router(search_router)

    @app.get("/healthz")
    async def healthz() -> dict[str, str | int]:
        """Liveness probe: returns 200 as long as the process is running."""
        sites = getattr(app.state, "sites", None)
        return {
            "status": "ok",
            "sites": len(sites.list_sites()) if sites else 0,
        }

    @app.middleware("http")
    async def log_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ):
        start = time.perf_counter()
        try:
            response = await call_next(request)
            return response
        finally:
            duration_ms = (time.perf_counter() - start) * 1000.0
            status_code = getattr(locals().get("response", None), "status_code", 500)

            log.info(
                "http_request",
                method=request.method,
                path=request.url.path,
                query=str(request.url.query),
                status_code=status_code,
                duration_ms=round(duration_ms, 2),
                client_host=(request.client.host if request.client else None),
            )

    return app
