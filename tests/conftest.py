"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any
from urllib.parse import urlencode

import pytest
import requests

from tracklist_harvester.output import TracklistWriter
from tracklist_harvester.pipeline import CrawlDriver, ShowPipeline
from tracklist_harvester.scrapers import EpisodeFetcher, TracklistFetcher
from tracklist_harvester.state import CheckpointStore


API_BASE = "https://api.test/api/v2"


class FakeResponse:
    def __init__(self, url: str, payload: Any = None, status_code: int = 200, text: str | None = None) -> None:
        self.url = url
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} for {self.url}", response=self)

    def json(self) -> Any:
        if self._text is not None:
            return json.loads(self._text)
        return self._payload


class FakeSession:
    """Serves canned JSON keyed by full URL (query string included)."""

    def __init__(self) -> None:
        self.routes: dict[str, Any] = {}
        self.calls: list[str] = []

    def add(self, url: str, payload: Any) -> None:
        self.routes[url] = payload

    def add_episodes(self, show_path: str, pages: list[list[dict]], limit: int = 12) -> None:
        for index, page in enumerate(pages):
            self.add(episodes_url(show_path, index * limit, limit), {"results": page})

    def get(self, url: str, params: dict | None = None, timeout: float | None = None) -> FakeResponse:
        full_url = f"{url}?{urlencode(params)}" if params else url
        self.calls.append(full_url)
        if full_url not in self.routes:
            return FakeResponse(full_url, status_code=404)
        payload = self.routes[full_url]
        if isinstance(payload, Exception):
            raise payload
        if isinstance(payload, FakeResponse):
            return payload
        return FakeResponse(full_url, payload)

    def calls_for(self, fragment: str) -> list[str]:
        return [call for call in self.calls if fragment in call]


class CountingLimiter:
    def __init__(self) -> None:
        self.acquired = 0

    def acquire(self, tokens: int = 1) -> None:
        self.acquired += tokens


def episodes_url(show_path: str, offset: int, limit: int = 12) -> str:
    return f"{API_BASE}{show_path}/episodes?offset={offset}&limit={limit}"


def make_episode(name: str, tracklist_href: str) -> dict:
    return {
        "name": name,
        "broadcast": "2024-01-01T00:00:00Z",
        "links": [
            {"rel": "self", "href": f"{API_BASE}/episodes/{name}"},
            {"rel": "tracklist", "href": tracklist_href},
        ],
    }


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def limiter() -> CountingLimiter:
    return CountingLimiter()


@pytest.fixture
def checkpoint_file(tmp_path: Path) -> Path:
    return tmp_path / "checkpoint.json"


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    return tmp_path / "out"


@pytest.fixture
def make_driver(fake_session: FakeSession, limiter: CountingLimiter, checkpoint_file: Path, output_dir: Path):
    """Build a driver wired to the fake session; checkpoint reloaded from disk each call."""

    def factory() -> CrawlDriver:
        episode_fetcher = EpisodeFetcher(
            limiter, session=fake_session, base_url=API_BASE, sleep=lambda seconds: None
        )
        tracklist_fetcher = TracklistFetcher(limiter, session=fake_session, base_url=API_BASE)
        checkpoint = CheckpointStore(checkpoint_file)
        checkpoint.load()
        pipeline = ShowPipeline(
            episode_fetcher, tracklist_fetcher, checkpoint, TracklistWriter(output_dir)
        )
        return CrawlDriver(pipeline)

    return factory
