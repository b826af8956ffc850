"""Map pipeline errors to HTTP errors."""

from __future__ import annotations

from fastapi import HTTPException

from svgtag.errors import FetchError, IconParseError, SvgTagError, UnknownCollectionError


def to_http(exc: SvgTagError) -> HTTPException:
    if isinstance(exc, UnknownCollectionError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, FetchError):
        return HTTPException(status_code=502, detail=str(exc))
    if isinstance(exc, IconParseError):
        return HTTPException(status_code=422, detail=str(exc))
    return HTTPException(status_code=500, detail=str(exc))
