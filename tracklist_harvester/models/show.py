"""Data models for the show catalog and episodes."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..config import GUEST_SHOW_MARKER


@dataclass
class Show:
    """A crawlable show credit. ``name`` doubles as the checkpoint key."""

    name: str
    path: str

    @property
    def is_guest_show(self) -> bool:
        return GUEST_SHOW_MARKER in self.path


@dataclass
class Mixtape:
    """A catalog grouping of show credits."""

    alias: str
    credits: List[Show] = field(default_factory=list)


@dataclass
class EpisodeLink:
    rel: str
    href: str


@dataclass
class Episode:
    """One installment of a show. Only its tracklist link is used."""

    name: str
    links: List[EpisodeLink] = field(default_factory=list)

    @property
    def tracklist_url(self) -> Optional[str]:
        for link in self.links:
            if link.rel == "tracklist":
                return link.href
        return None

    @classmethod
    def from_dict(cls, data: Dict) -> "Episode":
        links = [
            EpisodeLink(rel=link.get("rel", ""), href=link.get("href", ""))
            for link in data.get("links") or []
            if isinstance(link, dict)
        ]
        return cls(name=data.get("name") or "", links=links)
