"""Deduplication of tracks within a show."""

import logging
from typing import Dict, Iterable, List, Tuple

from ..models import Track

logger = logging.getLogger(__name__)


class DedupStore:
    """Set of tracks keyed by fingerprint, remembering first-seen order."""

    def __init__(self, tracks: Iterable[Track] = ()):
        self._tracks: Dict[Tuple[str, str], Track] = {}
        self.update(tracks)

    def add(self, track: Track) -> bool:
        """Insert ``track`` unless an equal track is present. Returns True if added."""
        key = track.fingerprint
        if key in self._tracks:
            return False
        self._tracks[key] = track
        return True

    def update(self, tracks: Iterable[Track]) -> int:
        """Add several tracks. Returns how many were new."""
        return sum(1 for track in tracks if self.add(track))

    def tracks(self) -> List[Track]:
        return list(self._tracks.values())

    def __contains__(self, track: Track) -> bool:
        return track.fingerprint in self._tracks

    def __len__(self) -> int:
        return len(self._tracks)


def merge_tracks(existing: Iterable[Track], new: Iterable[Track]) -> List[Track]:
    """
    Union of previously persisted tracks and freshly fetched ones.

    Merging the same inputs again yields the same result, which is what
    makes re-running a show safe after an interrupted or partial run.

    Args:
        existing: Tracks loaded from a prior output file (may be empty)
        new: Tracks fetched during this run

    Returns:
        Deduplicated tracks, existing entries first
    """
    store = DedupStore(existing)
    baseline = len(store)
    added = store.update(new)
    logger.debug(f"Merge: {baseline} existing + {added} new -> {len(store)} tracks")
    return store.tracks()
