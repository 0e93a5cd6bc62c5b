"""Upstream video-index API adapters (extraction, normalization, fetching)."""

from __future__ import annotations

from .episodes import extract_episodes
from .normalizer import normalize_item
from .page_fetcher import HttpxPageFetcher, build_page_url, encode_query

__all__ = [
    "HttpxPageFetcher",
    "build_page_url",
    "encode_query",
    "extract_episodes",
    "normalize_item",
]
