"""Shared fixtures for integration tests.

These tests use real infrastructure components (HttpxPageFetcher,
ConfigSiteRegistry, load_config) with mocked HTTP via respx.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest
import respx


@pytest.fixture()
async def http_client() -> httpx.AsyncClient:
    """Real httpx.AsyncClient for use with respx mocking."""
    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture()
def respx_mock() -> respx.MockRouter:
    """Explicit respx mock router for request interception."""
    with respx.mock(assert_all_called=False) as router:
        yield router


def _vod_item(vod_id: int, name: str, *, page: int = 1) -> dict[str, Any]:
    return {
        "vod_id": vod_id,
        "vod_name": name,
        "vod_pic": f"https://img.example.com/{vod_id}.jpg",
        "vod_play_url": (
            f"第01集$https://cdn.example.com/{vod_id}/p{page}/1.m3u8"
            f"#第02集$https://cdn.example.com/{vod_id}/p{page}/2.m3u8"
        ),
        "vod_year": "2021",
        "vod_content": "<p>desc</p>",
        "vod_class": "剧情",
        "type_name": "国产剧",
    }


@pytest.fixture()
def vod_item() -> Callable[..., dict[str, Any]]:
    """Factory for upstream ``list`` entries."""
    return _vod_item
