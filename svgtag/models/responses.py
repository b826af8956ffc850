"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgtag.models.icon_document import IconDocument


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    collections: list[str] = Field(default_factory=list)


class ImageResponse(BaseModel):
    svg: str
    width: float
    height: float
    ascent: str = "center"


class IconDataResponse(BaseModel):
    icon: IconDocument
    cached: bool = True
    ink_bounds: tuple[float, float, float, float] | None = None


class CacheClearResponse(BaseModel):
    removed: int
