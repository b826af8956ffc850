"""Error kinds raised by the icon pipeline."""

from __future__ import annotations


class SvgTagError(Exception):
    """Base error for the package."""


class UnknownCollectionError(SvgTagError, KeyError):
    """Icon collection name has no registry entry."""

    def __init__(self, collection: str) -> None:
        super().__init__(collection)
        self.collection = collection

    def __str__(self) -> str:
        return f"Unknown icon collection: {self.collection!r}"


class FetchError(SvgTagError):
    """Transport or HTTP failure while fetching an icon."""

    def __init__(self, url: str, reason: object) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class IconParseError(SvgTagError):
    """Fetched bytes are not a well-formed SVG document."""


class MissingViewboxError(IconParseError):
    """Root element of an icon has no viewBox attribute."""
