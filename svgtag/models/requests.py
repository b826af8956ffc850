"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgtag.models.style import StyleOverrides


class TagRequest(BaseModel):
    label: str = Field(..., description="Text shown inside the tag")
    style: str | StyleOverrides | None = Field(
        default=None,
        description="Named style or partial style applied over the default",
    )
    overrides: StyleOverrides = Field(default_factory=StyleOverrides, description="Ad-hoc style overrides")


class ProgressRequest(BaseModel):
    value: float = Field(..., description="Filled fraction, normally in [0, 1]; not clamped")
    style: str | StyleOverrides | None = None
    overrides: StyleOverrides = Field(default_factory=StyleOverrides)


class IconRequest(BaseModel):
    collection: str = Field(..., description="Registered icon collection name")
    name: str = Field(..., description="Icon name within the collection")
    style: str | StyleOverrides | None = None
    overrides: StyleOverrides = Field(default_factory=StyleOverrides)
    force_reload: bool = Field(default=False, description="Bypass and overwrite the icon cache")
    preserve_fills: bool = Field(default=False, description="Keep per-path fills from the source icon")
