from .base import ApiResponse, Endpoint, TmdbService
from .collections import CollectionService
from .configuration import ConfigurationService
from .discover import DiscoverService
from .find import FindService
from .movies import MoviesService
from .people import PeopleService
from .search import SearchService
from .tv import TvService
from .tv_episodes import TvEpisodesService
from .tv_seasons import TvSeasonsService

__all__ = [
    "ApiResponse",
    "CollectionService",
    "ConfigurationService",
    "DiscoverService",
    "Endpoint",
    "FindService",
    "MoviesService",
    "PeopleService",
    "SearchService",
    "TmdbService",
    "TvEpisodesService",
    "TvSeasonsService",
    "TvService",
]
