"""Stream-link extraction from upstream ``vod_play_url`` blobs.

A blob looks like::

    第01集$https://a/1.m3u8#第02集$https://a/2.m3u8$$$第01集$https://b/1/share

i.e. one segment per playback source, joined by ``$$$``.  Each segment
holds ``label$url`` pairs.  Only ``.m3u8`` playlists are kept.
"""

from __future__ import annotations

import re
from typing import Any

SEGMENT_DELIMITER = "$$$"

_M3U8_RE = re.compile(r"\$(https?://[^\"'\s]+?\.m3u8)")


def _find_links(text: str) -> list[str]:
    """Return all ``$``-prefixed m3u8 matches, prefix included."""
    return [m.group(0) for m in _M3U8_RE.finditer(text)]


def _richest_segment_links(blob: str) -> list[str]:
    """Matches of the segment with the most m3u8 links (first wins ties)."""
    best: list[str] = []
    for segment in blob.split(SEGMENT_DELIMITER):
        matches = _find_links(segment)
        if len(matches) > len(best):
            best = matches
    return best


def _clean_link(raw: str) -> str:
    link = raw[1:]
    paren = link.find("(")
    return link[:paren] if paren > 0 else link


def extract_episodes(blob: Any, *, first_page: bool = True) -> list[str]:
    """Extract the ordered, de-duplicated episode URLs from *blob*.

    First-page items pick the segment with the most stream links; items
    from later pages are matched against the whole blob without segment
    isolation.  Both modes are kept as-is, see DESIGN.md.

    Never raises: absent, non-string, or link-less blobs yield ``[]``.
    """
    if not blob or not isinstance(blob, str):
        return []

    if first_page:
        matches = _richest_segment_links(blob)
    else:
        matches = _find_links(blob)

    unique = dict.fromkeys(matches)
    return list(dict.fromkeys(_clean_link(m) for m in unique))
