"""Tests for the persistent icon byte cache."""

from __future__ import annotations

import threading

import pytest

from svgtag.errors import FetchError
from svgtag.icons.cache import IconCache
from tests.conftest import STAR_SVG, TWO_TONE_SVG, FakeFetcher

URL = "https://icons.test/star.svg"


def test_miss_fetches_and_stores(tmp_path):
    fetcher = FakeFetcher()
    cache = IconCache(tmp_path, fetcher)
    assert not cache.contains(URL)
    assert cache.get(URL) == STAR_SVG
    assert fetcher.calls == [URL]
    assert cache.contains(URL)
    assert cache.path_for(URL).read_bytes() == STAR_SVG


def test_hit_does_not_fetch(tmp_path):
    fetcher = FakeFetcher()
    cache = IconCache(tmp_path, fetcher)
    cache.get(URL)
    cache.get(URL)
    assert fetcher.calls == [URL]


def test_force_reload_overwrites(tmp_path):
    fetcher = FakeFetcher()
    cache = IconCache(tmp_path, fetcher)
    cache.get(URL)
    fetcher.payload = TWO_TONE_SVG
    assert cache.get(URL, force_reload=True) == TWO_TONE_SVG
    assert len(fetcher.calls) == 2
    assert cache.get(URL) == TWO_TONE_SVG
    assert len(fetcher.calls) == 2


def test_corrupt_entry_reused_until_forced(tmp_path):
    fetcher = FakeFetcher()
    cache = IconCache(tmp_path, fetcher)
    path = cache.path_for(URL)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"garbage")
    assert cache.get(URL) == b"garbage"
    assert fetcher.calls == []
    assert cache.get(URL, force_reload=True) == STAR_SVG


def test_hit_bypasses_fetch_errors(tmp_path):
    cache = IconCache(tmp_path, FakeFetcher())
    cache.get(URL)
    cache.fetcher = FakeFetcher(error=OSError("offline"))
    assert cache.get(URL) == STAR_SVG


def test_failed_fetch_leaves_no_entry(tmp_path):
    cache = IconCache(tmp_path, FakeFetcher(error=OSError("offline")))
    with pytest.raises(FetchError):
        cache.get(URL)
    assert not cache.contains(URL)
    assert list(tmp_path.iterdir()) == []


def test_failed_forced_reload_keeps_old_entry(tmp_path):
    cache = IconCache(tmp_path, FakeFetcher())
    cache.get(URL)
    cache.fetcher = FakeFetcher(error=OSError("offline"))
    with pytest.raises(FetchError):
        cache.get(URL, force_reload=True)
    assert cache.path_for(URL).read_bytes() == STAR_SVG


def test_distinct_urls_distinct_entries(tmp_path):
    cache = IconCache(tmp_path, FakeFetcher())
    assert cache.path_for(URL) != cache.path_for(URL + "?v=2")


def test_clear(tmp_path):
    cache = IconCache(tmp_path / "icons", FakeFetcher())
    assert cache.clear() == 0
    cache.get(URL)
    cache.get(URL + "?v=2")
    assert cache.clear() == 2
    assert not cache.contains(URL)


def test_directory_user_expanded():
    cache = IconCache("~/svgtag-icons", FakeFetcher())
    assert "~" not in str(cache.directory)


def test_concurrent_gets_fetch_once(tmp_path):
    fetcher = FakeFetcher(delay=0.05)
    cache = IconCache(tmp_path, fetcher)
    results: list[bytes] = []

    def worker():
        results.append(cache.get(URL))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert fetcher.calls == [URL]
    assert results == [STAR_SVG] * 8
    assert cache._locks == {}


def test_url_locks_released_after_use(tmp_path):
    cache = IconCache(tmp_path, FakeFetcher())
    cache.get(URL)
    cache.get(URL + "?v=2", force_reload=True)
    assert cache._locks == {}


def test_url_lock_released_after_failed_fetch(tmp_path):
    cache = IconCache(tmp_path, FakeFetcher(error=OSError("offline")))
    with pytest.raises(FetchError):
        cache.get(URL)
    assert cache._locks == {}
