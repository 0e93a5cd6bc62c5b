from __future__ import annotations

from typing import cast

import structlog
from fastapi import APIRouter, Query, Request, Response
from fastapi.responses import JSONResponse

from vodarr.domain.entities import VodBadRequest, VodSiteNotFound
from vodarr.interfaces.api.search.presenter import (
    render_results,
    render_site,
)
from vodarr.interfaces.app_state import AppState

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/search", tags=["search"])


def _cached_json(state: AppState, content: object) -> JSONResponse:
    cache_time = state.config.cache_time_seconds
    return JSONResponse(
        content=content,
        headers={"Cache-Control": f"public, max-age={cache_time}"},
    )


def _error(message: str, *, status_code: int) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code)


@router.get("")
async def search(
    request: Request,
    q: str | None = Query(None, description="Search query"),
) -> Response:
    state = cast(AppState, request.app.state)

    try:
        results = await state.vod_search_uc.execute(q)
    except Exception:
        log.exception("vod_search_unhandled_error", query=q)
        return _error("search failed", status_code=500)

    return _cached_json(state, render_results(results))


@router.get("/one")
async def search_one(
    request: Request,
    resource_id: str | None = Query(
        None, alias="resourceId", description="Upstream site key"
    ),
    q: str | None = Query(None, description="Exact title"),
) -> Response:
    state = cast(AppState, request.app.state)

    try:
        results = await state.vod_lookup_uc.execute(resource_id, q)
    except VodBadRequest as e:
        return _error(str(e), status_code=400)
    except VodSiteNotFound:
        return _error("Resource not found", status_code=404)
    except Exception:
        log.exception("vod_lookup_unhandled_error", site=resource_id, query=q)
        return _error("Failed to fetch resource details", status_code=500)

    return _cached_json(state, render_results(results))


@router.get("/resources")
async def resources(request: Request) -> Response:
    state = cast(AppState, request.app.state)
    sites = state.vod_sites_uc.execute()
    return _cached_json(state, [render_site(s) for s in sites])
