from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class UpstreamSite:
    key: str  # Short identifier (e.g. "heimuer")
    name: str  # Human-readable name
    api: str  # Base API URL, templates are appended verbatim
    search_path: str = "?ac=videolist&wd={query}"
    page_path: str = "?ac=videolist&wd={query}&pg={page}"
    detail: str | None = None  # Optional detail-page base URL
    headers: Mapping[str, str] = field(default_factory=dict)  # Site-specific extras


@dataclass(frozen=True)
class SearchResult:
    id: str
    title: str
    poster: str
    episodes: tuple[str, ...]
    source: str  # UpstreamSite.key
    source_name: str  # UpstreamSite.name
    year: str = ""  # Exactly 4 digits or empty
    desc: str = ""  # Plain text, HTML stripped
    class_name: str | None = None  # Rendered as "class"
    type_name: str | None = None


@dataclass(frozen=True)
class PageResult:
    """One fetched upstream page.

    ``page_count`` is the upstream-reported total and only meaningful
    for first-page fetches.
    """

    results: tuple[SearchResult, ...] = ()
    page_count: int = 1


class VodError(Exception):
    """Base error for vod domain/usecases."""


class VodBadRequest(VodError):
    pass


class VodSiteNotFound(VodError):
    pass


class VodExternalError(VodError):
    """Unexpected failure while joining the top-level search fan-out."""
