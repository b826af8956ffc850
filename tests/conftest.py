"""Shared test fixtures."""

from __future__ import annotations

import threading
import time

import pytest

from svgtag.engine.context import RenderContext
from svgtag.engine.metrics import FixedMetrics
from svgtag.engine.style import PaletteColorResolver
from svgtag.errors import FetchError
from svgtag.icons.cache import IconCache
from svgtag.icons.collections import CollectionRegistry
from svgtag.icons.loader import IconLoader


# Sample icons, shaped like the ones the default collections serve

STAR_SVG = b'''<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">
  <path d="M12,17.27L18.18,21L16.54,13.97L22,9.24L14.81,8.62L12,2L9.19,8.62L2,9.24L7.45,13.97L5.82,21L12,17.27Z" />
</svg>'''

# Two paths with their own fills, one nested in a group
TWO_TONE_SVG = b'''<svg xmlns="http://www.w3.org/2000/svg" width="16" height="16" viewBox="0 0 16 16">
  <path fill="#ff0000" d="M0 0 L8 0 L8 8 Z"/>
  <g>
    <path fill="#00ff00" d="M8 8 L16 8 L16 16 Z"/>
  </g>
</svg>'''

OFFSET_VIEWBOX_SVG = b'''<svg xmlns="http://www.w3.org/2000/svg" viewBox="-2 -2 20 20">
  <path d="M-2 -2 L18 -2 L18 18 L-2 18 Z"/>
</svg>'''

NO_VIEWBOX_SVG = b'''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <path d="M0 0 L24 24"/>
</svg>'''

MALFORMED_SVG = b'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24"><path d="M0 0"'


class FakeFetcher:
    """Returns canned bytes and records every URL it is asked for."""

    def __init__(self, payload: bytes = STAR_SVG, responses: dict[str, bytes] | None = None,
                 error: Exception | None = None, delay: float = 0.0) -> None:
        self.payload = payload
        self.responses = responses or {}
        self.error = error
        self.delay = delay
        self.calls: list[str] = []
        self._lock = threading.Lock()

    def fetch(self, url: str) -> bytes:
        with self._lock:
            self.calls.append(url)
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise FetchError(url, self.error)
        return self.responses.get(url, self.payload)


def make_context(fetcher: FakeFetcher, cache_dir, **kwargs) -> RenderContext:
    loader = IconLoader(CollectionRegistry(), IconCache(cache_dir, fetcher))
    return RenderContext(
        metrics=kwargs.pop("metrics", FixedMetrics(char_width=10.0, char_height=20.0)),
        icons=loader,
        color_resolver=PaletteColorResolver(),
        **kwargs,
    )


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def cache_dir(tmp_path):
    return tmp_path / "icons"


@pytest.fixture
def context(fetcher, cache_dir) -> RenderContext:
    return make_context(fetcher, cache_dir)


@pytest.fixture
def metrics() -> FixedMetrics:
    return FixedMetrics(char_width=10.0, char_height=20.0)
