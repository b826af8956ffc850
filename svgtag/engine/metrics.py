"""Text grid and font metrics consumed by the geometry calculator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import NamedTuple, Protocol

from PIL import ImageFont

logger = logging.getLogger(__name__)


class FontInfo(NamedTuple):
    size: float
    ascent: float
    # Advance width of one glyph (fonts used for tags are monospaced)
    glyph_width: float


class FontMetrics(Protocol):
    char_width: float
    char_height: float

    def font_info(self, family: str, size: float) -> FontInfo: ...


@dataclass(frozen=True)
class FixedMetrics:
    """Deterministic metrics: a fixed character cell and size-proportional glyphs."""

    char_width: float = 10.0
    char_height: float = 20.0
    ascent_ratio: float = 0.8
    advance_ratio: float = 0.6

    def font_info(self, family: str, size: float) -> FontInfo:
        return FontInfo(
            size=size,
            ascent=size * self.ascent_ratio,
            glyph_width=size * self.advance_ratio,
        )


@lru_cache(maxsize=64)
def _load_font(family: str, size: float) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(family, size)
    except OSError:
        logger.info("Font %r not found, using Pillow's built-in font", family)
        return ImageFont.load_default(size)


@dataclass(frozen=True)
class PillowMetrics:
    """Measures real fonts through Pillow. ``family`` is a font file or name."""

    char_width: float = 10.0
    char_height: float = 20.0

    def font_info(self, family: str, size: float) -> FontInfo:
        font = _load_font(family, float(size))
        ascent, _descent = font.getmetrics()
        return FontInfo(size=size, ascent=float(ascent), glyph_width=float(font.getlength("M")))
