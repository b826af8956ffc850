"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgtag.dependencies import get_context
from svgtag.engine.context import RenderContext
from svgtag.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health(ctx: RenderContext = Depends(get_context)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        collections=sorted(ctx.icons.registry),
    )
