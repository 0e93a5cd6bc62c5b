"""Composition root: dependency injection via FastAPI lifespan."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from vodarr.application.use_cases import (
    SiteSearcher,
    VodLookupUseCase,
    VodSearchUseCase,
    VodSitesUseCase,
)
from vodarr.infrastructure.config.schema import AppConfig
from vodarr.infrastructure.sites import ConfigSiteRegistry
from vodarr.infrastructure.vod import HttpxPageFetcher
from vodarr.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


def build_http_client(config: AppConfig) -> httpx.AsyncClient:
    """Shared upstream client; the only source of the User-Agent header."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(config.search_timeout_seconds),
        headers={"User-Agent": config.http_user_agent},
        follow_redirects=config.http_follow_redirects,
    )


def wire_state(
    state: AppState, config: AppConfig, http_client: httpx.AsyncClient
) -> None:
    """Build registry, fetcher, searcher and use cases on *state*."""
    state.http_client = http_client

    state.sites = ConfigSiteRegistry(
        config.sites,
        search_path=config.search_path,
        page_path=config.search_page_path,
    )
    state.page_fetcher = HttpxPageFetcher(
        http_client,
        timeout=config.search_timeout_seconds,
        headers=config.search_headers,
    )
    state.site_searcher = SiteSearcher(
        state.page_fetcher,
        max_pages=config.search_max_pages,
    )
    state.vod_search_uc = VodSearchUseCase(
        sites=state.sites, searcher=state.site_searcher
    )
    state.vod_lookup_uc = VodLookupUseCase(
        sites=state.sites, searcher=state.site_searcher
    )
    state.vod_sites_uc = VodSitesUseCase(sites=state.sites)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan Hook: Initialize and cleanup all resources (DI Composition Root).

    Order matters:
        1. HTTP Client (shared by all page fetches, no retries)
        2. Site Registry (from config)
        3. Page Fetcher -> Site Searcher -> Use Cases
    """
    state = cast(AppState, app.state)
    config = state.config

    # 1) HTTP client; per-request timeouts are set by the page fetcher
    http_client = build_http_client(config)
    log.info("http_client_initialized")

    # 2-3) Registry, fetcher, searcher, use cases
    wire_state(state, config, http_client)
    log.info(
        "vod_pipeline_initialized",
        sites=[s.key for s in state.sites.list_sites()],
        max_pages=config.search_max_pages,
        timeout_seconds=config.search_timeout_seconds,
    )

    log.info("app_startup_complete")

    try:
        yield
    finally:
        await http_client.aclose()
        log.info("http_client_closed")
        log.info("app_shutdown_complete")
