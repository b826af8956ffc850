"""Style Resolver: merge base style + overrides, normalise colours and weights."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Protocol

from PIL import ImageColor
from pydantic import BaseModel

from svgtag.models.style import COLOR_KEYS, DEFAULT_STYLE, STYLE_KEYS, Style

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")

# CSS numeric weights for the symbolic names fonts commonly use.
_WEIGHTS: dict[str, int] = {
    "thin": 100,
    "hairline": 100,
    "extralight": 200,
    "ultralight": 200,
    "light": 300,
    "semilight": 350,
    "normal": 400,
    "regular": 400,
    "book": 400,
    "medium": 500,
    "semibold": 600,
    "demibold": 600,
    "bold": 700,
    "extrabold": 800,
    "ultrabold": 800,
    "black": 900,
    "heavy": 900,
}

_WEIGHT_SEPARATORS_RE = re.compile(r"[-_\s]")


class ColorResolver(Protocol):
    def resolve(self, name: str) -> str:
        """Return ``#rrggbb`` for a known colour name, else ``name`` unchanged."""
        ...


class PillowColorResolver:
    """Resolves any colour specifier understood by ``PIL.ImageColor``."""

    def resolve(self, name: str) -> str:
        if not isinstance(name, str) or _HEX_COLOR_RE.match(name):
            return name
        try:
            rgb = ImageColor.getrgb(name)
        except ValueError:
            return name
        return "#{:02x}{:02x}{:02x}".format(*rgb[:3])


class PaletteColorResolver:
    """Resolves names from a fixed palette only."""

    BASIC = {
        "black": "#000000",
        "white": "#ffffff",
        "red": "#ff0000",
        "green": "#008000",
        "blue": "#0000ff",
        "yellow": "#ffff00",
        "gray": "#808080",
        "grey": "#808080",
        "orange": "#ffa500",
    }

    def __init__(self, palette: Mapping[str, str] | None = None) -> None:
        self._palette = {k.lower(): v for k, v in (palette or self.BASIC).items()}

    def resolve(self, name: str) -> str:
        if not isinstance(name, str):
            return name
        return self._palette.get(name.lower(), name)


_default_color_resolver = PillowColorResolver()


def normalize_color(value: Any, resolver: ColorResolver | None = None) -> Any:
    return (resolver or _default_color_resolver).resolve(value)


def normalize_weight(value: Any) -> Any:
    """Map a symbolic weight ("bold", "semi-bold") to its number; pass others through."""
    if not isinstance(value, str):
        return value
    key = _WEIGHT_SEPARATORS_RE.sub("", value).lower()
    return _WEIGHTS.get(key, value)


def _explicit_values(overrides: Any) -> dict[str, Any]:
    """Keys explicitly given in ``overrides``, restricted to the style key set."""
    if overrides is None:
        return {}
    if isinstance(overrides, BaseModel):
        values = overrides.model_dump(exclude_unset=True)
    elif isinstance(overrides, Mapping):
        values = dict(overrides)
    else:
        return {}
    return {k: v for k, v in values.items() if k in STYLE_KEYS and v is not None}


def resolve(
    base: Style | None = None,
    overrides: Any = None,
    *,
    color_resolver: ColorResolver | None = None,
) -> Style:
    """Merge ``overrides`` over ``base`` (default style when omitted).

    Unknown keys are ignored and values are not validated, so this never
    raises. Colours are normalised and weight names turned into numbers.
    """
    values = (base if base is not None else DEFAULT_STYLE).model_dump()
    values.update(_explicit_values(overrides))

    for key in COLOR_KEYS:
        values[key] = normalize_color(values[key], color_resolver)
    values["weight"] = normalize_weight(values["weight"])

    return Style.model_construct(**values)
