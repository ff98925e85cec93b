"""Fetcher for a show's paginated episode list."""

import time
from typing import Callable, List

from ..config import EPISODE_PAGE_SIZE, PAGE_DELAY_SECONDS
from ..models import Episode, EpisodeLink
from .base import BaseFetcher, MalformedResponseError, join_url


class EpisodeFetcher(BaseFetcher):
    """Retrieve every episode of a show, one page at a time."""

    def __init__(
        self,
        *args,
        page_size: int = EPISODE_PAGE_SIZE,
        page_delay: float = PAGE_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        **kwargs,
    ):
        super().__init__(*args, **kwargs)
        self.page_size = page_size
        self.page_delay = page_delay
        self._sleep = sleep

    def guest_tracklist_url(self, show_path: str) -> str:
        return join_url(self.base_url, show_path) + "/tracklist"

    def fetch_all_episodes(self, show_path: str, is_guest_show: bool) -> List[Episode]:
        """
        Fetch all episodes of a show in page order.

        Guest shows have no episode list; a single synthetic episode pointing
        at the guest tracklist endpoint is returned without any request.

        Paging stops only when the API returns an empty page.

        Args:
            show_path: API path of the show, e.g. ``/shows/foo``
            is_guest_show: Whether the show is a guest show

        Returns:
            Episodes in the order the API returned them
        """
        if is_guest_show:
            link = EpisodeLink(rel="tracklist", href=self.guest_tracklist_url(show_path))
            return [Episode(name="", links=[link])]

        url = join_url(self.base_url, show_path) + "/episodes"
        episodes: List[Episode] = []
        offset = 0

        while True:
            page = self._fetch_results(
                url, params={"offset": offset, "limit": self.page_size}
            )
            if not page:
                break

            for entry in page:
                if not isinstance(entry, dict):
                    raise MalformedResponseError(
                        f"Episode entry at offset {offset} is not an object"
                    )
                episodes.append(Episode.from_dict(entry))

            self.logger.debug(
                f"{show_path}: page at offset {offset} returned {len(page)} episodes"
            )
            offset += self.page_size

            if self.page_delay > 0:
                self._sleep(self.page_delay)

        return episodes
