"""Parsed icon document model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class IconPath(BaseModel):
    model_config = ConfigDict(frozen=True)

    d: str
    fill: str | None = None


class IconDocument(BaseModel):
    """Vector paths of one fetched icon and the viewBox they are authored in."""

    model_config = ConfigDict(frozen=True)

    viewbox: tuple[float, float, float, float]
    paths: tuple[IconPath, ...] = Field(default_factory=tuple)
    source_url: str = ""

    @property
    def x(self) -> float:
        return self.viewbox[0]

    @property
    def y(self) -> float:
        return self.viewbox[1]

    @property
    def width(self) -> float:
        return self.viewbox[2]

    @property
    def height(self) -> float:
        return self.viewbox[3]
