"""JSON rendering of search results and sites."""

from __future__ import annotations

from typing import Any

from vodarr.domain.entities import SearchResult, UpstreamSite


def render_result(result: SearchResult) -> dict[str, Any]:
    """Wire shape of a SearchResult (``class_name`` -> ``class``)."""
    return {
        "id": result.id,
        "title": result.title,
        "poster": result.poster,
        "episodes": list(result.episodes),
        "source": result.source,
        "source_name": result.source_name,
        "class": result.class_name,
        "year": result.year,
        "desc": result.desc,
        "type_name": result.type_name,
    }


def render_results(results: list[SearchResult]) -> dict[str, Any]:
    return {"results": [render_result(r) for r in results]}


def render_site(site: UpstreamSite) -> dict[str, Any]:
    out: dict[str, Any] = {"key": site.key, "name": site.name, "api": site.api}
    if site.detail:
        out["detail"] = site.detail
    return out
