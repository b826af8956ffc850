"""IconLoader: (collection, name) -> IconDocument through the byte cache."""

from __future__ import annotations

import logging

from svgtag.icons.cache import IconCache
from svgtag.icons.collections import CollectionRegistry
from svgtag.models.icon_document import IconDocument
from svgtag.svg.parser import parse_icon

logger = logging.getLogger(__name__)


class IconLoader:
    def __init__(self, registry: CollectionRegistry, cache: IconCache) -> None:
        self.registry = registry
        self.cache = cache

    def url_for(self, collection: str, name: str) -> str:
        return self.registry.url_for(collection, name)

    def get(self, collection: str, name: str, force_reload: bool = False) -> IconDocument:
        """Resolve, fetch when needed, and parse one icon.

        Raises UnknownCollectionError before any I/O, FetchError when a needed
        fetch fails, IconParseError/MissingViewboxError for unusable bytes.
        """
        url = self.url_for(collection, name)
        data = self.cache.get(url, force_reload=force_reload)
        return parse_icon(data, source_url=url)
