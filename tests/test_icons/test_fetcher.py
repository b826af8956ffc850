"""Tests for the urllib fetcher (file:// URLs, no network)."""

from __future__ import annotations

from http.client import IncompleteRead

import pytest

import svgtag.icons.fetcher as fetcher_module
from svgtag.errors import FetchError
from svgtag.icons.fetcher import UrlFetcher
from tests.conftest import STAR_SVG


def test_fetch_file_url(tmp_path):
    icon = tmp_path / "star.svg"
    icon.write_bytes(STAR_SVG)
    assert UrlFetcher().fetch(icon.as_uri()) == STAR_SVG


def test_missing_file_raises_fetch_error(tmp_path):
    url = (tmp_path / "missing.svg").as_uri()
    with pytest.raises(FetchError) as excinfo:
        UrlFetcher().fetch(url)
    assert excinfo.value.url == url


def test_malformed_url_raises_fetch_error():
    with pytest.raises(FetchError):
        UrlFetcher().fetch("not a url")


class _TruncatedResponse:
    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def read(self):
        raise IncompleteRead(b"<svg", 120)


def test_truncated_body_raises_fetch_error(monkeypatch):
    monkeypatch.setattr(fetcher_module, "urlopen", lambda req, timeout: _TruncatedResponse())
    with pytest.raises(FetchError) as excinfo:
        UrlFetcher().fetch("https://example.test/star.svg")
    assert isinstance(excinfo.value.__cause__, IncompleteRead)
