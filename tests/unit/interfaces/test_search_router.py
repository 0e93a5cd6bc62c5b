"""Tests for the search router endpoints."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from vodarr.domain.entities import (
    SearchResult,
    UpstreamSite,
    VodBadRequest,
    VodSiteNotFound,
)
from vodarr.infrastructure.config import AppConfig
from vodarr.interfaces.api.search.presenter import render_result
from vodarr.interfaces.api.search.router import router

_RESULT = SearchResult(
    id="42",
    title="Iron Man",
    poster="https://img.test/p.jpg",
    episodes=("https://cdn.test/1.m3u8", "https://cdn.test/2.m3u8"),
    source="a",
    source_name="Site A",
    year="2008",
    desc="Suit.",
    class_name="动作",
    type_name="电影",
)


def _make_app(
    *,
    search_uc: AsyncMock | None = None,
    lookup_uc: AsyncMock | None = None,
    sites: list[UpstreamSite] | None = None,
    cache_time: int = 600,
) -> FastAPI:
    """Create a minimal FastAPI app with the search router."""
    app = FastAPI()
    app.include_router(router)

    app.state.config = AppConfig(cache_time_seconds=cache_time)
    app.state.vod_search_uc = search_uc or AsyncMock()
    app.state.vod_lookup_uc = lookup_uc or AsyncMock()

    sites_uc = MagicMock()
    sites_uc.execute.return_value = sites or []
    app.state.vod_sites_uc = sites_uc
    return app


class TestPresenter:
    def test_wire_shape(self) -> None:
        assert render_result(_RESULT) == {
            "id": "42",
            "title": "Iron Man",
            "poster": "https://img.test/p.jpg",
            "episodes": ["https://cdn.test/1.m3u8", "https://cdn.test/2.m3u8"],
            "source": "a",
            "source_name": "Site A",
            "class": "动作",
            "year": "2008",
            "desc": "Suit.",
            "type_name": "电影",
        }


class TestSearchEndpoint:
    def test_returns_results_with_cache_header(self) -> None:
        uc = AsyncMock()
        uc.execute.return_value = [_RESULT]
        client = TestClient(_make_app(search_uc=uc, cache_time=600))

        resp = client.get("/api/search", params={"q": "Iron Man"})

        assert resp.status_code == 200
        assert resp.headers["cache-control"] == "public, max-age=600"
        assert resp.json() == {"results": [render_result(_RESULT)]}
        uc.execute.assert_awaited_once_with("Iron Man")

    def test_missing_query_returns_empty_results(self) -> None:
        uc = AsyncMock()
        uc.execute.return_value = []
        client = TestClient(_make_app(search_uc=uc))

        resp = client.get("/api/search")

        assert resp.status_code == 200
        assert resp.json() == {"results": []}
        uc.execute.assert_awaited_once_with(None)

    def test_unexpected_error_returns_500(self) -> None:
        uc = AsyncMock()
        uc.execute.side_effect = RuntimeError("boom")
        client = TestClient(_make_app(search_uc=uc))

        resp = client.get("/api/search", params={"q": "x"})

        assert resp.status_code == 500
        assert resp.json() == {"error": "search failed"}
        assert "cache-control" not in resp.headers


class TestSearchOneEndpoint:
    def test_returns_filtered_results(self) -> None:
        uc = AsyncMock()
        uc.execute.return_value = [_RESULT]
        client = TestClient(_make_app(lookup_uc=uc))

        resp = client.get(
            "/api/search/one", params={"resourceId": "a", "q": "Iron Man"}
        )

        assert resp.status_code == 200
        assert resp.json()["results"][0]["id"] == "42"
        assert "max-age" in resp.headers["cache-control"]
        uc.execute.assert_awaited_once_with("a", "Iron Man")

    def test_bad_request(self) -> None:
        uc = AsyncMock()
        uc.execute.side_effect = VodBadRequest("resourceId and q are required")
        client = TestClient(_make_app(lookup_uc=uc))

        resp = client.get("/api/search/one", params={"q": "x"})

        assert resp.status_code == 400
        assert "required" in resp.json()["error"]

    def test_unknown_site_returns_404(self) -> None:
        uc = AsyncMock()
        uc.execute.side_effect = VodSiteNotFound("zzz")
        client = TestClient(_make_app(lookup_uc=uc))

        resp = client.get("/api/search/one", params={"resourceId": "zzz", "q": "x"})

        assert resp.status_code == 404
        assert resp.json() == {"error": "Resource not found"}

    def test_unexpected_error_returns_500(self) -> None:
        uc = AsyncMock()
        uc.execute.side_effect = RuntimeError("boom")
        client = TestClient(_make_app(lookup_uc=uc))

        resp = client.get("/api/search/one", params={"resourceId": "a", "q": "x"})

        assert resp.status_code == 500


class TestResourcesEndpoint:
    def test_lists_sites(self) -> None:
        sites = [
            UpstreamSite(key="a", name="A", api="https://a.test", detail="https://a.tv"),
            UpstreamSite(key="b", name="B", api="https://b.test"),
        ]
        client = TestClient(_make_app(sites=sites, cache_time=30))

        resp = client.get("/api/search/resources")

        assert resp.status_code == 200
        assert resp.headers["cache-control"] == "public, max-age=30"
        assert resp.json() == [
            {"key": "a", "name": "A", "api": "https://a.test", "detail": "https://a.tv"},
            {"key": "b", "name": "B", "api": "https://b.test"},
        ]
