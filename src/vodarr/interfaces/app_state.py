"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from vodarr.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from vodarr.application.use_cases import (
        SiteSearcher,
        VodLookupUseCase,
        VodSearchUseCase,
        VodSitesUseCase,
    )
    from vodarr.domain.ports import PageFetcherPort, SiteRegistryPort


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    http_client: httpx.AsyncClient

    # Domain Ports
    sites: SiteRegistryPort
    page_fetcher: PageFetcherPort

    # Application Services
    site_searcher: SiteSearcher
    vod_search_uc: VodSearchUseCase
    vod_lookup_uc: VodLookupUseCase
    vod_sites_uc: VodSitesUseCase
