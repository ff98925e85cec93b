"""Data model for tracks."""

from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Track:
    """A single track played on a show.

    Two tracks are the same track only when artist and title match exactly.
    No case folding or whitespace trimming is applied.
    """

    artist: str
    title: str

    @property
    def fingerprint(self) -> Tuple[str, str]:
        """Deduplication key, independent of any serialization order."""
        return (self.artist, self.title)

    def to_dict(self) -> Dict[str, str]:
        return {"artist": self.artist, "title": self.title}

    @classmethod
    def from_dict(cls, data: Dict) -> "Track":
        """Project an API or file entry onto a Track, dropping extra fields.

        Raises:
            KeyError: If ``artist`` or ``title`` is missing.
            TypeError: If the entry is not a mapping, or a field is neither
                a string nor null.
        """
        if not isinstance(data, dict):
            raise TypeError(f"Track entry must be an object, got {type(data).__name__}")
        artist, title = data["artist"], data["title"]
        for name, value in (("artist", artist), ("title", title)):
            if value is not None and not isinstance(value, str):
                raise TypeError(f"Track {name} must be a string, got {type(value).__name__}")
        return cls(artist=artist, title=title)
