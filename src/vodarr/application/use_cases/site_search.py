"""Per-site search: first page, page budget, concurrent extra pages."""

from __future__ import annotations

import asyncio

import structlog

from vodarr.domain.entities import SearchResult, UpstreamSite
from vodarr.domain.ports import PageFetcherPort

log = structlog.get_logger(__name__)

DEFAULT_MAX_PAGES = 5


class SiteSearcher:
    """Searches one upstream across up to ``max_pages`` pages.

    Flow:
        1. Fetch page 1; no items -> done (no further requests)
        2. pages_to_fetch = min(pagecount - 1, max_pages - 1), clamped at 0
        3. Fetch pages 2..pages_to_fetch+1 concurrently
        4. Concatenate page 1 + extra pages in page order

    A failing page contributes nothing; it never drops its siblings.
    """

    def __init__(
        self,
        fetcher: PageFetcherPort,
        *,
        max_pages: int = DEFAULT_MAX_PAGES,
    ) -> None:
        if max_pages < 1:
            raise ValueError("max_pages must be >= 1")
        self._fetcher = fetcher
        self._max_pages = max_pages

    @property
    def max_pages(self) -> int:
        return self._max_pages

    async def search(self, site: UpstreamSite, query: str) -> list[SearchResult]:
        """Search *site* for *query*; never raises for upstream failures."""
        try:
            return await self._search(site, query)
        except Exception:
            log.warning(
                "vod_site_search_failed", site=site.key, query=query, exc_info=True
            )
            return []

    async def _search(self, site: UpstreamSite, query: str) -> list[SearchResult]:
        first = await self._fetcher.fetch_page(site, query, 1)
        if not first.results:
            log.debug("vod_site_no_results", site=site.key, query=query)
            return []

        pages_to_fetch = max(0, min(first.page_count - 1, self._max_pages - 1))
        results = list(first.results)
        if pages_to_fetch == 0:
            return results

        extra_pages = await asyncio.gather(
            *(
                self._fetch_extra_page(site, query, page)
                for page in range(2, pages_to_fetch + 2)
            )
        )
        for page_results in extra_pages:
            results.extend(page_results)

        log.debug(
            "vod_site_search_done",
            site=site.key,
            query=query,
            page_count=first.page_count,
            pages_fetched=pages_to_fetch + 1,
            result_count=len(results),
        )
        return results

    async def _fetch_extra_page(
        self, site: UpstreamSite, query: str, page: int
    ) -> list[SearchResult]:
        try:
            page_result = await self._fetcher.fetch_page(site, query, page)
        except Exception:
            log.warning(
                "vod_page_failed", site=site.key, page=page, exc_info=True
            )
            return []
        return list(page_result.results)
