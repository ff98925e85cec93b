from .show import Episode, EpisodeLink, Mixtape, Show
from .track import Track

__all__ = [
    "Episode",
    "EpisodeLink",
    "Mixtape",
    "Show",
    "Track",
]
