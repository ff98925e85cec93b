"""Fetcher for a single episode's tracklist."""

from typing import List

from ..models import Track
from .base import BaseFetcher, MalformedResponseError


class TracklistFetcher(BaseFetcher):
    """Retrieve the tracks of one episode (or one guest show).

    The tracklist endpoint is fetched as a single page. If the API ever
    truncates long tracklists the missing tracks are not recovered.
    """

    def fetch_tracklist(self, url: str) -> List[Track]:
        tracks = []
        for entry in self._fetch_results(url):
            try:
                tracks.append(Track.from_dict(entry))
            except (KeyError, TypeError) as e:
                raise MalformedResponseError(
                    f"Unexpected tracklist entry from {url}: {e}"
                ) from e
        return tracks
