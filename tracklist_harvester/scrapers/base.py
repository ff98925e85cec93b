"""Base fetcher class with common functionality."""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..config import API_BASE_URL, REQUEST_TIMEOUT, USER_AGENT
from .rate_limit import TokenBucket


class ScraperError(Exception):
    """Base exception for fetcher errors."""

    pass


class MalformedResponseError(ScraperError):
    """Raised when a response does not carry the expected JSON shape."""

    pass


def create_session() -> requests.Session:
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})
    return session


def join_url(base: str, path: str) -> str:
    """Join an API base and a show path with exactly one slash between them."""
    return f"{base.rstrip('/')}/{path.lstrip('/')}"


class BaseFetcher:
    """Shared plumbing for API fetchers: session, throttle, JSON decoding."""

    def __init__(
        self,
        rate_limiter: TokenBucket,
        session: Optional[requests.Session] = None,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self.rate_limiter = rate_limiter
        self.session = session or create_session()
        self.base_url = base_url
        self.timeout = timeout
        self.logger = logging.getLogger(self.__class__.__name__)

    def _fetch_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Acquire a rate-limit token and GET ``url`` as JSON.

        Raises:
            requests.RequestException: On network failure or non-2xx status.
            MalformedResponseError: If the body is not valid JSON.
        """
        self.rate_limiter.acquire()
        self.logger.debug(f"Fetching: {url} {params or ''}")
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(f"Invalid JSON from {url}: {e}") from e

    def _fetch_results(self, url: str, params: Optional[Dict[str, Any]] = None) -> List:
        """Fetch ``url`` and return its ``results`` list."""
        payload = self._fetch_json(url, params=params)
        results = payload.get("results") if isinstance(payload, dict) else None
        if not isinstance(results, list):
            raise MalformedResponseError(f"Response from {url} has no 'results' list")
        return results
