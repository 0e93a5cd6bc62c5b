from .vod import (
    PageResult,
    SearchResult,
    UpstreamSite,
    VodBadRequest,
    VodError,
    VodExternalError,
    VodSiteNotFound,
)

__all__ = [
    "PageResult",
    "SearchResult",
    "UpstreamSite",
    "VodBadRequest",
    "VodError",
    "VodExternalError",
    "VodSiteNotFound",
]
