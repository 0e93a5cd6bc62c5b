"""Site registry backed by the validated application config."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from vodarr.domain.entities import UpstreamSite, VodSiteNotFound
from vodarr.infrastructure.config.schema import SiteConfig

log = structlog.get_logger(__name__)


class ConfigSiteRegistry:
    """Ordered, read-only collection of upstream sites.

    Per-site ``path``/``page_path`` fall back to the global search
    templates. Per-site ``headers`` are carried as-is; the page fetcher
    layers them over the global search headers. Order follows the
    configuration file.
    """

    def __init__(
        self,
        sites: Iterable[SiteConfig],
        *,
        search_path: str,
        page_path: str,
    ) -> None:
        self._sites: list[UpstreamSite] = [
            UpstreamSite(
                key=s.key,
                name=s.name,
                api=s.api,
                search_path=s.path or search_path,
                page_path=s.page_path or page_path,
                detail=s.detail,
                headers=dict(s.headers),
            )
            for s in sites
        ]
        self._by_key = {s.key: s for s in self._sites}
        log.debug("site_registry_loaded", sites=list(self._by_key))

    def list_sites(self) -> list[UpstreamSite]:
        return list(self._sites)

    def get(self, key: str) -> UpstreamSite:
        try:
            return self._by_key[key]
        except KeyError:
            raise VodSiteNotFound(key) from None
