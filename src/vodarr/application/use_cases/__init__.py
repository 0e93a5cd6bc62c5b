from .site_search import SiteSearcher
from .vod_lookup import VodLookupUseCase
from .vod_search import VodSearchUseCase
from .vod_sites import VodSitesUseCase

__all__ = ["SiteSearcher", "VodLookupUseCase", "VodSearchUseCase", "VodSitesUseCase"]
