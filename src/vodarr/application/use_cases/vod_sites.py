"""Use case for listing the configured upstream sites."""

from __future__ import annotations

from vodarr.domain.entities import UpstreamSite
from vodarr.domain.ports import SiteRegistryPort


class VodSitesUseCase:
    """Returns the configured sites verbatim (no network I/O)."""

    def __init__(self, *, sites: SiteRegistryPort) -> None:
        self._sites = sites

    def execute(self) -> list[UpstreamSite]:
        return self._sites.list_sites()
