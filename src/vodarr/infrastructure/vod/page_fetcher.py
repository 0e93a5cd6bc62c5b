"""httpx-backed fetcher for a single upstream search page.

Every failure mode (timeout, transport error, non-2xx status, invalid
JSON, unexpected shape) is logged and degrades to an empty
``PageResult``.  Nothing is retried.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

import httpx
import structlog

from vodarr.domain.entities import PageResult, UpstreamSite
from vodarr.infrastructure.common import to_page_count

from .normalizer import normalize_item

log = structlog.get_logger(__name__)

DEFAULT_PAGE_TIMEOUT = 8.0

_EMPTY = PageResult()

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_query(query: str) -> str:
    """Percent-encode *query* for use inside a URL query component."""
    return quote(query, safe=_URI_COMPONENT_SAFE)


def build_page_url(site: UpstreamSite, query: str, page: int = 1) -> str:
    """Build the search URL for *page* from the site's path templates."""
    template = site.search_path if page <= 1 else site.page_path
    path = template.replace("{query}", encode_query(query)).replace(
        "{page}", str(page)
    )
    return site.api + path


class HttpxPageFetcher:
    """Fetches and normalizes one upstream search page.

    The shared ``httpx.AsyncClient`` is owned by the composition root;
    the fetcher only borrows it.  The timeout covers the whole call and
    is scoped to that call alone.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        *,
        timeout: float = DEFAULT_PAGE_TIMEOUT,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._http = http_client
        self._timeout = timeout
        self._headers = dict(headers or {})

    async def fetch_page(
        self, site: UpstreamSite, query: str, page: int = 1
    ) -> PageResult:
        url = build_page_url(site, query, page)

        resp = await self._safe_get(
            url, headers={**self._headers, **site.headers}, site=site, page=page
        )
        if resp is None:
            return _EMPTY

        data = self._safe_parse_json(resp, site=site, page=page)
        if data is None:
            return _EMPTY

        items = data.get("list") if isinstance(data, dict) else None
        if not isinstance(items, list):
            log.warning(
                "vod_page_unexpected_shape",
                site=site.key,
                page=page,
                url=url,
                payload_type=type(data).__name__,
            )
            return _EMPTY

        first_page = page <= 1
        results = tuple(
            normalize_item(item, site, first_page=first_page)
            for item in items
            if isinstance(item, Mapping)
        )
        skipped = len(items) - len(results)
        page_count = to_page_count(data.get("pagecount")) if first_page else 1

        log.info(
            "vod_page_fetched",
            site=site.key,
            page=page,
            item_count=len(results),
            skipped=skipped,
            page_count=page_count,
        )
        return PageResult(results=results, page_count=page_count)

    async def _safe_get(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        site: UpstreamSite,
        page: int,
    ) -> httpx.Response | None:
        """GET *url* with a per-call deadline. Returns ``None`` on failure."""
        try:
            resp = await asyncio.wait_for(
                self._http.get(url, headers=headers, timeout=self._timeout),
                timeout=self._timeout,
            )
        except (TimeoutError, httpx.TimeoutException):
            log.warning(
                "vod_page_timeout",
                site=site.key,
                page=page,
                url=url,
                timeout=self._timeout,
            )
            return None
        except httpx.HTTPError as exc:
            log.warning(
                "vod_page_fetch_error",
                site=site.key,
                page=page,
                url=url,
                error=str(exc),
            )
            return None
        except Exception as exc:  # noqa: BLE001
            log.warning(
                "vod_page_fetch_error",
                site=site.key,
                page=page,
                url=url,
                error=repr(exc),
            )
            return None

        if not resp.is_success:
            log.warning(
                "vod_page_http_error",
                site=site.key,
                page=page,
                url=url,
                status=resp.status_code,
            )
            return None
        return resp

    def _safe_parse_json(
        self, resp: httpx.Response, *, site: UpstreamSite, page: int
    ) -> Any | None:
        try:
            return resp.json()
        except (json.JSONDecodeError, UnicodeDecodeError, ValueError):
            log.warning(
                "vod_page_invalid_json",
                site=site.key,
                page=page,
                url=str(resp.url),
            )
            return None
