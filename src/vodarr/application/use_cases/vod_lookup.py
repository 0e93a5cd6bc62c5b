"""Exact-title lookup on a single upstream site."""

from __future__ import annotations

import structlog

from vodarr.domain.entities import SearchResult, VodBadRequest
from vodarr.domain.ports import SiteRegistryPort

from .vod_search import _SiteSearcher

log = structlog.get_logger(__name__)


class VodLookupUseCase:
    """Runs one site's search and keeps records whose title equals the query."""

    def __init__(self, *, sites: SiteRegistryPort, searcher: _SiteSearcher) -> None:
        self._sites = sites
        self._searcher = searcher

    async def execute(
        self, site_key: str | None, query: str | None
    ) -> list[SearchResult]:
        """
        Raises:
            VodBadRequest: site_key or query missing.
            VodSiteNotFound: site_key is not configured.
        """
        if not site_key or not query:
            raise VodBadRequest("resourceId and q are required")

        site = self._sites.get(site_key)
        results = await self._searcher.search(site, query)
        matches = [r for r in results if r.title == query]

        log.info(
            "vod_lookup_completed",
            site=site.key,
            query=query,
            candidate_count=len(results),
            match_count=len(matches),
        )
        return matches
