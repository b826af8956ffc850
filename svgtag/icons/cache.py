"""Persistent icon byte cache keyed by resolved URL."""

from __future__ import annotations

import hashlib
import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from svgtag.icons.fetcher import Fetcher

logger = logging.getLogger(__name__)


class IconCache:
    """Fetch-if-absent-or-forced byte store.

    An entry, once written, is reused until a forced reload overwrites it;
    stale or corrupt entries are never refreshed automatically. Calls for the
    same URL are serialised so concurrent callers fetch it at most once.
    """

    def __init__(self, directory: str | os.PathLike, fetcher: Fetcher) -> None:
        self.directory = Path(directory).expanduser()
        self.fetcher = fetcher
        # url -> [lock, number of callers holding or waiting on it]
        self._locks: dict[str, list] = {}
        self._locks_guard = threading.Lock()

    def path_for(self, url: str) -> Path:
        digest = hashlib.sha256(url.encode("utf-8")).hexdigest()
        return self.directory / f"{digest}.svg"

    def contains(self, url: str) -> bool:
        return self.path_for(url).is_file()

    def get(self, url: str, force_reload: bool = False) -> bytes:
        with self._lock_for(url):
            path = self.path_for(url)
            if force_reload or not path.is_file():
                logger.info("Icon cache %s for %s", "reload" if force_reload else "miss", url)
                self._store(path, self.fetcher.fetch(url))
            else:
                logger.debug("Icon cache hit for %s", url)
            return path.read_bytes()

    def clear(self) -> int:
        """Delete every cached entry. Returns the number removed."""
        removed = 0
        if self.directory.is_dir():
            for entry in self.directory.glob("*.svg"):
                entry.unlink()
                removed += 1
        logger.info("Cleared %d icon cache entries from %s", removed, self.directory)
        return removed

    @contextmanager
    def _lock_for(self, url: str) -> Iterator[None]:
        with self._locks_guard:
            entry = self._locks.setdefault(url, [threading.Lock(), 0])
            entry[1] += 1
        try:
            with entry[0]:
                yield
        finally:
            with self._locks_guard:
                entry[1] -= 1
                if entry[1] == 0:
                    del self._locks[url]

    def _store(self, path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=path.parent, suffix=".part")
        try:
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.replace(tmp, path)
        except BaseException:
            Path(tmp).unlink(missing_ok=True)
            raise
