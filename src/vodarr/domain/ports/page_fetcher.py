"""Port for fetching a single upstream search page."""

from __future__ import annotations

from typing import Protocol

from vodarr.domain.entities import PageResult, UpstreamSite


class PageFetcherPort(Protocol):
    """Async interface for one bounded-timeout page request.

    Implementations never raise for upstream failures; they return an
    empty ``PageResult`` instead.
    """

    async def fetch_page(
        self, site: UpstreamSite, query: str, page: int = 1
    ) -> PageResult: ...
