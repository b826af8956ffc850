"""/api/icons: parsed icon data and icon cache maintenance."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgtag.api.errors import to_http
from svgtag.dependencies import get_context
from svgtag.engine.context import RenderContext
from svgtag.engine.render import get_icon_data
from svgtag.errors import SvgTagError
from svgtag.models.responses import CacheClearResponse, IconDataResponse
from svgtag.svg.parser import ink_bounds

router = APIRouter(prefix="/icons")


@router.get("/{collection}/{name}", response_model=IconDataResponse)
def icon_data(
    collection: str,
    name: str,
    force_reload: bool = False,
    ctx: RenderContext = Depends(get_context),
) -> IconDataResponse:
    try:
        url = ctx.icons.url_for(collection, name)
        cached = ctx.icons.cache.contains(url) and not force_reload
        doc = get_icon_data(collection, name, force_reload, context=ctx)
    except SvgTagError as e:
        raise to_http(e) from e
    return IconDataResponse(icon=doc, cached=cached, ink_bounds=ink_bounds(doc))


@router.delete("/cache", response_model=CacheClearResponse)
def clear_cache(ctx: RenderContext = Depends(get_context)) -> CacheClearResponse:
    """Drop every cached icon; the next request for each one refetches it."""
    return CacheClearResponse(removed=ctx.icons.cache.clear())
