"""Map raw upstream search items to canonical SearchResults."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from vodarr.domain.entities import SearchResult, UpstreamSite
from vodarr.infrastructure.common import clean_html_tags, to_text

from .episodes import extract_episodes

_YEAR_RE = re.compile(r"\d{4}")


def _extract_year(raw: Any) -> str:
    match = _YEAR_RE.search(to_text(raw))
    return match.group(0) if match else ""


def _optional_text(raw: Any) -> str | None:
    return None if raw is None else to_text(raw)


def normalize_item(
    item: Mapping[str, Any],
    site: UpstreamSite,
    *,
    first_page: bool = True,
) -> SearchResult:
    """Convert one ``list`` entry of an upstream response.

    Total: missing fields become empty strings / ``None`` and the
    episode list may be empty, but this never raises for odd shapes.

    Args:
        item: Raw JSON object (``vod_id``, ``vod_name``, ``vod_play_url``, ...).
        site: The upstream the item came from.
        first_page: Selects the episode extraction mode.
    """
    return SearchResult(
        id=to_text(item.get("vod_id")),
        title=to_text(item.get("vod_name")),
        poster=to_text(item.get("vod_pic")),
        episodes=tuple(
            extract_episodes(item.get("vod_play_url"), first_page=first_page)
        ),
        source=site.key,
        source_name=site.name,
        year=_extract_year(item.get("vod_year")),
        desc=clean_html_tags(to_text(item.get("vod_content"))),
        class_name=_optional_text(item.get("vod_class")),
        type_name=_optional_text(item.get("type_name")),
    )
