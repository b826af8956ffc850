"""Fetch substrate: URL -> raw bytes."""

from __future__ import annotations

import logging
from http.client import HTTPException
from typing import Protocol
from urllib.error import URLError
from urllib.request import Request, urlopen

from svgtag.errors import FetchError

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    def fetch(self, url: str) -> bytes: ...


class UrlFetcher:
    """Blocking HTTP(S) fetch. No retries; the timeout is the only bound."""

    def __init__(self, timeout: float = 10.0, user_agent: str = "svgtag") -> None:
        self.timeout = timeout
        self.user_agent = user_agent

    def fetch(self, url: str) -> bytes:
        logger.info("Fetching %s", url)
        try:
            req = Request(url, headers={"User-Agent": self.user_agent})
            with urlopen(req, timeout=self.timeout) as resp:
                return resp.read()
        except (URLError, HTTPException, OSError, ValueError) as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            raise FetchError(url, e) from e
