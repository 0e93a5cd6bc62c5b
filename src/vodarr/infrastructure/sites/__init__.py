from __future__ import annotations

from .registry import ConfigSiteRegistry

__all__ = ["ConfigSiteRegistry"]
