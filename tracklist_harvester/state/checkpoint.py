"""Checkpoint of fully processed shows, used to resume interrupted crawls."""

import json
import logging
from pathlib import Path
from typing import Dict

logger = logging.getLogger(__name__)


class CheckpointStore:
    """
    Persisted mapping of show name -> "fully processed".

    Every update rewrites the whole file so it is always a complete
    snapshot. A show is only marked once its output file has been written.
    """

    def __init__(self, checkpoint_file: Path):
        self.checkpoint_file = Path(checkpoint_file)
        self.state: Dict[str, bool] = {}

    def load(self) -> Dict[str, bool]:
        """Load the checkpoint file. A missing or unreadable file means no progress."""
        self.state = {}
        if not self.checkpoint_file.exists():
            logger.debug(f"No checkpoint at {self.checkpoint_file}, starting fresh")
            return self.state

        try:
            with open(self.checkpoint_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning(f"Failed to load checkpoint file: {e}")
            return self.state

        if not isinstance(data, dict):
            logger.warning(
                f"Ignoring checkpoint {self.checkpoint_file}: expected an object"
            )
            return self.state

        self.state = {str(name): done is True for name, done in data.items()}
        done_count = sum(1 for done in self.state.values() if done)
        logger.info(f"Loaded checkpoint with {done_count} completed shows")
        return self.state

    def is_done(self, show_name: str) -> bool:
        return self.state.get(show_name, False)

    def mark_done(self, show_name: str):
        """Flag ``show_name`` as processed and persist the whole mapping."""
        self.state[show_name] = True
        self.save()

    def save(self):
        self.checkpoint_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.checkpoint_file, "w", encoding="utf-8") as f:
            json.dump(self.state, f, indent=2, ensure_ascii=False)
