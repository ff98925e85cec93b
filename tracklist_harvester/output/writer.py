"""Reading and writing per-show tracklist files."""

import json
import logging
import re
from pathlib import Path
from typing import List

from ..config import TRACKLIST_SUFFIX
from ..models import Track

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s+")


def sanitize_show_name(name: str) -> str:
    """Lowercase, whitespace runs and slashes replaced with underscores."""
    return WHITESPACE_RE.sub("_", name.lower()).replace("/", "_")


class TracklistWriter:
    """Store deduplicated tracklists under ``<output_dir>/<mixtape alias>/``."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def mixtape_dir(self, mixtape_alias: str) -> Path:
        return self.output_dir / mixtape_alias

    def path_for(self, mixtape_alias: str, show_name: str) -> Path:
        filename = f"{sanitize_show_name(show_name)}{TRACKLIST_SUFFIX}"
        return self.mixtape_dir(mixtape_alias) / filename

    def load(self, path: Path) -> List[Track]:
        """
        Load previously written tracks.

        A missing or unparseable file is an empty baseline, not an error.
        Individual entries without an artist or title are skipped.
        """
        if not path.exists():
            return []

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Ignoring unreadable tracklist {path}: {e}")
            return []

        if not isinstance(data, list):
            logger.warning(f"Ignoring tracklist {path}: expected a JSON array")
            return []

        tracks = []
        for entry in data:
            try:
                tracks.append(Track.from_dict(entry))
            except (KeyError, TypeError):
                logger.warning(f"Skipping malformed entry in {path}: {entry!r}")
        return tracks

    def save(self, path: Path, tracks: List[Track]):
        """Overwrite ``path`` with ``tracks`` as a JSON array."""
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump([track.to_dict() for track in tracks], f, indent=2, ensure_ascii=False)
