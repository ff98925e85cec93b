from .base import BaseFetcher, MalformedResponseError, ScraperError, create_session
from .episodes import EpisodeFetcher
from .rate_limit import TokenBucket
from .tracklists import TracklistFetcher

__all__ = [
    "BaseFetcher",
    "MalformedResponseError",
    "ScraperError",
    "create_session",
    "EpisodeFetcher",
    "TokenBucket",
    "TracklistFetcher",
]
