"""Read-only track counts over a directory of harvested tracklists."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from ..filters import DedupStore
from ..models import Track

logger = logging.getLogger(__name__)


@dataclass
class ShowCount:
    total: int = 0
    deduplicated: int = 0


@dataclass
class TrackCounts:
    total_tracks: int = 0
    deduplicated_tracks: int = 0
    show_counts: Dict[str, ShowCount] = field(default_factory=dict)


def count_tracks(directory: Path) -> TrackCounts:
    """
    Tally every ``*.json`` tracklist under ``directory``.

    Per-show counts are keyed by file stem. The overall deduplicated
    count is taken across all files.
    """
    counts = TrackCounts()
    everything = DedupStore()

    for path in sorted(Path(directory).rglob("*.json")):
        if not path.is_file():
            continue
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
            tracks = [Track.from_dict(entry) for entry in data]
            show_tracks = DedupStore(tracks)
        except (json.JSONDecodeError, IOError, KeyError, TypeError) as e:
            logger.warning(f"Skipping {path}: {e}")
            continue

        counts.total_tracks += len(tracks)
        show = counts.show_counts.setdefault(path.stem, ShowCount())
        show.total += len(tracks)
        show.deduplicated = len(show_tracks)
        everything.update(tracks)

    counts.deduplicated_tracks = len(everything)
    return counts


def log_counts(counts: TrackCounts):
    logger.info(f"Total number of tracks: {counts.total_tracks}")
    logger.info(f"Total number of deduplicated tracks: {counts.deduplicated_tracks}")
    logger.info("Track counts per show:")
    for show, show_count in counts.show_counts.items():
        logger.info(
            f"  {show}: Total = {show_count.total}, "
            f"Deduplicated = {show_count.deduplicated}"
        )
