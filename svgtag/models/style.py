"""Style records: fully-populated Style and partial StyleOverrides."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Style(BaseModel):
    """Visual parameters for a tag, progress bar or icon.

    Colours are CSS names or ``#rrggbb`` strings, lengths are device units
    except ``padding``/``margin``/``width`` which count character cells where
    they size a box. ``height`` is the font size and ``weight`` a CSS weight.
    """

    model_config = ConfigDict(frozen=True)

    foreground: str = "black"
    background: str = "white"
    stroke: str = "black"
    thickness: float = 1.0
    radius: float = 3.0
    padding: float = 1.0
    margin: float = 1.0
    width: float = 20.0
    scale: float = 0.75
    family: str = "monospace"
    height: float = 12.0
    weight: int | str = "regular"


STYLE_KEYS: tuple[str, ...] = tuple(Style.model_fields)

COLOR_KEYS: tuple[str, ...] = ("foreground", "background", "stroke")


class StyleOverrides(BaseModel):
    """Partial style. Unset fields inherit from the base style."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    foreground: str | None = None
    background: str | None = None
    stroke: str | None = None
    thickness: float | None = None
    radius: float | None = None
    padding: float | None = None
    margin: float | None = None
    width: float | None = None
    scale: float | None = None
    family: str | None = None
    height: float | None = None
    weight: int | str | None = None


DEFAULT_STYLE = Style()
