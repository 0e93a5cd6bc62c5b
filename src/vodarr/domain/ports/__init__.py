from .page_fetcher import PageFetcherPort
from .site_registry import SiteRegistryPort

__all__ = [
    "PageFetcherPort",
    "SiteRegistryPort",
]
