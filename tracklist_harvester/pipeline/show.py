"""Per-show crawl: fetch, deduplicate, merge, persist, checkpoint."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..filters import DedupStore, merge_tracks
from ..models import Show
from ..output import TracklistWriter
from ..scrapers import EpisodeFetcher, TracklistFetcher
from ..state import CheckpointStore

logger = logging.getLogger(__name__)


class ShowState(Enum):
    PENDING = "pending"
    SKIPPED = "skipped"
    FETCHING = "fetching"
    MERGING = "merging"
    PERSISTED = "persisted"
    CHECKPOINTED = "checkpointed"
    FAILED = "failed"


@dataclass
class RunTotals:
    """Counters for one crawl run. Owned by the driver, never persisted."""

    tracks_written: int = 0
    processed: int = 0
    skipped: int = 0
    failed: int = 0

    @property
    def attempted(self) -> int:
        return self.processed + self.skipped + self.failed


@dataclass
class ShowResult:
    show: Show
    state: ShowState
    track_count: int = 0
    error: Optional[str] = None
    failed_step: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.state in (ShowState.CHECKPOINTED, ShowState.SKIPPED)


class ShowPipeline:
    """
    Crawl a single show.

    States: PENDING -> SKIPPED when the checkpoint already has the show,
    otherwise PENDING -> FETCHING -> MERGING -> PERSISTED -> CHECKPOINTED.
    Any exception before the checkpoint is written ends in FAILED, tagged
    with the step that raised (fetching, merging, writing tracklist or
    writing checkpoint); the show stays unchecked and is retried from
    scratch on the next run.
    """

    def __init__(
        self,
        episode_fetcher: EpisodeFetcher,
        tracklist_fetcher: TracklistFetcher,
        checkpoint: CheckpointStore,
        writer: TracklistWriter,
    ):
        self.episode_fetcher = episode_fetcher
        self.tracklist_fetcher = tracklist_fetcher
        self.checkpoint = checkpoint
        self.writer = writer

    def process_show(
        self,
        show: Show,
        mixtape_alias: str,
        show_index: int,
        total_shows: int,
        totals: RunTotals,
    ) -> ShowResult:
        """
        Process one show and update ``totals``.

        Args:
            show: The show credit to crawl
            mixtape_alias: Mixtape the show belongs to (output subfolder)
            show_index: Zero-based position of the show in the whole catalog
            total_shows: Number of shows in the catalog
            totals: Run-wide accumulator, updated in place

        Returns:
            The final state of the show
        """
        position = f"{show_index + 1}/{total_shows}"

        if self.checkpoint.is_done(show.name):
            logger.info(f"Skipping already processed show: {show.name}")
            totals.skipped += 1
            return ShowResult(show=show, state=ShowState.SKIPPED)

        step = "fetching"
        try:
            logger.info(f"Processing show {position}: {show.name}")
            fetched = self._fetch_tracks(show)

            step = "merging"
            path = self.writer.path_for(mixtape_alias, show.name)
            existing = self.writer.load(path)
            merged = merge_tracks(existing, fetched.tracks())

            step = "writing tracklist"
            self.writer.save(path, merged)
            logger.info(f"Saved tracklist for {show.name} to {path}")

            step = "writing checkpoint"
            self.checkpoint.mark_done(show.name)
        except Exception as e:
            logger.error(f"Error processing show {show.name} ({step}): {e}")
            totals.failed += 1
            return ShowResult(
                show=show, state=ShowState.FAILED, error=str(e), failed_step=step
            )

        track_count = len(merged)
        totals.tracks_written += track_count
        totals.processed += 1
        logger.info(
            f"Show {position} processed. Track count: {track_count}. "
            f"Running total: {totals.tracks_written}"
        )
        return ShowResult(show=show, state=ShowState.CHECKPOINTED, track_count=track_count)

    def _fetch_tracks(self, show: Show) -> DedupStore:
        episodes = self.episode_fetcher.fetch_all_episodes(show.path, show.is_guest_show)
        store = DedupStore()

        for episode_index, episode in enumerate(episodes, start=1):
            logger.info(f"  Fetching episode {episode_index}/{len(episodes)}")
            url = episode.tracklist_url
            if not url:
                logger.debug(f"  Episode {episode.name!r} has no tracklist link")
                continue
            store.update(self.tracklist_fetcher.fetch_tracklist(url))

        return store
