"""Aggregated search across every configured upstream site."""

from __future__ import annotations

import asyncio
from typing import Protocol

import structlog

from vodarr.domain.entities import SearchResult, UpstreamSite, VodExternalError
from vodarr.domain.ports import SiteRegistryPort

log = structlog.get_logger(__name__)


class _SiteSearcher(Protocol):
    """Searches one upstream; returns [] instead of raising."""

    async def search(self, site: UpstreamSite, query: str) -> list[SearchResult]: ...


class VodSearchUseCase:
    """Fans a query out to all sites and flattens the results.

    Every site is launched before any is awaited. Output order follows
    the site configuration, then page order within a site.
    """

    def __init__(self, *, sites: SiteRegistryPort, searcher: _SiteSearcher) -> None:
        self._sites = sites
        self._searcher = searcher

    async def execute(self, query: str | None) -> list[SearchResult]:
        """Search all sites for *query*.

        Raises:
            VodExternalError: The fan-out join itself failed (not raised
                for upstream/network conditions).
        """
        if not query:
            return []

        sites = self._sites.list_sites()
        try:
            per_site = await asyncio.gather(
                *(self._search_site(site, query) for site in sites)
            )
        except Exception as e:
            raise VodExternalError(f"Search fan-out failed: {e!s}") from e

        results = [r for site_results in per_site for r in site_results]
        log.info(
            "vod_search_completed",
            query=query,
            site_count=len(sites),
            sites_with_results=sum(1 for r in per_site if r),
            result_count=len(results),
        )
        return results

    async def _search_site(
        self, site: UpstreamSite, query: str
    ) -> list[SearchResult]:
        try:
            return await self._searcher.search(site, query)
        except Exception:
            log.warning("vod_site_isolation_triggered", site=site.key, exc_info=True)
            return []
