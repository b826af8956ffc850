"""POST /api/tag, /api/progress, /api/icon: grid-aligned images."""

from __future__ import annotations

from typing import Any, Literal

from fastapi import APIRouter, Depends, Query, Response

from svgtag.api.errors import to_http
from svgtag.dependencies import get_context
from svgtag.engine.context import RenderContext
from svgtag.engine.render import make_icon, make_progress_bar, make_tag
from svgtag.errors import SvgTagError
from svgtag.models.requests import IconRequest, ProgressRequest, TagRequest
from svgtag.models.responses import ImageResponse
from svgtag.models.style import StyleOverrides
from svgtag.svg.image import Image

router = APIRouter()

ImageFormat = Literal["json", "svg", "png"]


def _given(overrides: StyleOverrides) -> dict[str, Any]:
    return overrides.model_dump(exclude_unset=True, exclude_none=True)


def _respond(image: Image, fmt: ImageFormat) -> Response | ImageResponse:
    if fmt == "png":
        return Response(content=image.to_png(), media_type="image/png")
    if fmt == "svg":
        return Response(content=image.svg, media_type="image/svg+xml")
    return ImageResponse(svg=image.svg, width=image.width, height=image.height, ascent=image.ascent)


@router.post("/tag", response_model=ImageResponse)
def tag(
    req: TagRequest,
    fmt: ImageFormat = Query("json", alias="format"),
    ctx: RenderContext = Depends(get_context),
):
    image = make_tag(req.label, req.style, context=ctx, **_given(req.overrides))
    return _respond(image, fmt)


@router.post("/progress", response_model=ImageResponse)
def progress(
    req: ProgressRequest,
    fmt: ImageFormat = Query("json", alias="format"),
    ctx: RenderContext = Depends(get_context),
):
    image = make_progress_bar(req.value, req.style, context=ctx, **_given(req.overrides))
    return _respond(image, fmt)


@router.post("/icon", response_model=ImageResponse)
def icon(
    req: IconRequest,
    fmt: ImageFormat = Query("json", alias="format"),
    ctx: RenderContext = Depends(get_context),
):
    try:
        image = make_icon(
            req.collection,
            req.name,
            req.style,
            context=ctx,
            force_reload=req.force_reload,
            preserve_fills=req.preserve_fills,
            **_given(req.overrides),
        )
    except SvgTagError as e:
        raise to_http(e) from e
    return _respond(image, fmt)
