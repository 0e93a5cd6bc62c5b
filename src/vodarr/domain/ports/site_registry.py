"""Port for read-only access to the configured upstream sites."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from vodarr.domain.entities import UpstreamSite


@runtime_checkable
class SiteRegistryPort(Protocol):
    """Synchronous interface for listing and resolving upstream sites."""

    def list_sites(self) -> list[UpstreamSite]: ...
    def get(self, key: str) -> UpstreamSite: ...
