"""Shared test fixtures for vodarr test suite."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any
from unittest.mock import MagicMock

import pytest

from vodarr.domain.entities import (
    PageResult,
    SearchResult,
    UpstreamSite,
    VodSiteNotFound,
)

# ---------------------------------------------------------------------------
# Domain entity fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def site() -> UpstreamSite:
    """Minimal valid UpstreamSite."""
    return UpstreamSite(
        key="heimuer",
        name="黑木耳",
        api="https://api.example.com/provide/vod",
    )


@pytest.fixture()
def raw_item() -> dict[str, Any]:
    """Typical upstream ``list`` entry."""
    return {
        "vod_id": 4242,
        "vod_name": "Iron Man",
        "vod_pic": "https://img.example.com/ironman.jpg",
        "vod_remarks": "HD",
        "vod_play_url": (
            "正片$https://cdn.example.com/ironman/index.m3u8"
            "$$$正片$https://share.example.com/ironman"
        ),
        "vod_class": "动作,科幻",
        "vod_year": "2008",
        "vod_content": "<p>Tony Stark builds a suit.</p>",
        "type_name": "动作片",
    }


def _make_result(
    title: str = "Iron Man",
    *,
    id: str = "1",
    source: str = "heimuer",
    source_name: str = "黑木耳",
) -> SearchResult:
    return SearchResult(
        id=id,
        title=title,
        poster="",
        episodes=(),
        source=source,
        source_name=source_name,
    )


# ---------------------------------------------------------------------------
# Mock port fixtures
# ---------------------------------------------------------------------------


class FakePageFetcher:
    """PageFetcherPort fake driven by a ``(site_key, page) -> PageResult`` map.

    Records every call; a mapped exception is raised instead of returned.
    """

    def __init__(
        self,
        pages: dict[tuple[str, int], PageResult | BaseException] | None = None,
    ) -> None:
        self.pages = pages or {}
        self.calls: list[tuple[str, str, int]] = []

    async def fetch_page(
        self, site: UpstreamSite, query: str, page: int = 1
    ) -> PageResult:
        self.calls.append((site.key, query, page))
        outcome = self.pages.get((site.key, page), PageResult())
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    def pages_requested(self, site_key: str) -> list[int]:
        return sorted(p for k, _, p in self.calls if k == site_key)


@pytest.fixture()
def fake_fetcher() -> FakePageFetcher:
    return FakePageFetcher()


@pytest.fixture()
def site_registry_factory() -> Callable[[list[UpstreamSite]], MagicMock]:
    """Build a mock SiteRegistryPort over a fixed site list."""

    def _make(sites: list[UpstreamSite]) -> MagicMock:
        by_key = {s.key: s for s in sites}

        def _get(key: str) -> UpstreamSite:
            if key not in by_key:
                raise VodSiteNotFound(key)
            return by_key[key]

        registry = MagicMock()
        registry.list_sites.return_value = list(sites)
        registry.get.side_effect = _get
        return registry

    return _make


@pytest.fixture()
def make_result() -> Callable[..., SearchResult]:
    """Factory for minimal SearchResults (title / id / source overridable)."""
    return _make_result
