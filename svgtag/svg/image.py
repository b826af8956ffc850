"""Displayable image handle produced from a VectorDocument."""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass

from PIL import Image as PILImage

from svgtag.svg.document import VectorDocument
from svgtag.svg.serializer import format_number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Image:
    """SVG image sized to the text grid.

    ``ascent="center"`` asks the host to centre the image vertically on the
    text line; ``scale`` is always 1 so one SVG unit is one device pixel.
    """

    document: VectorDocument
    ascent: str = "center"
    scale: float = 1.0

    @property
    def width(self) -> float:
        return self.document.width

    @property
    def height(self) -> float:
        return self.document.height

    @property
    def svg(self) -> str:
        return self.document.to_svg()

    def to_png(self, scale: float | None = None) -> bytes:
        """Rasterize with cairosvg. ``scale`` multiplies the pixel size (default 1)."""
        import cairosvg

        factor = self.scale if scale is None else scale
        return cairosvg.svg2png(
            bytestring=self.svg.encode("utf-8"),
            output_width=max(1, round(self.width * factor)),
            output_height=max(1, round(self.height * factor)),
        )

    def to_pil(self, scale: float | None = None) -> PILImage.Image:
        return PILImage.open(io.BytesIO(self.to_png(scale)))

    def _repr_svg_(self) -> str:
        return self.svg

    def __repr__(self) -> str:
        return (
            f"Image({format_number(self.width)}x{format_number(self.height)},"
            f" {len(self.document.elements)} elements)"
        )


def render_image(document: VectorDocument) -> Image:
    """Wrap a composed document as a vertically centred, unit-scale image."""
    logger.debug(
        "Rendering image %sx%s with %d elements",
        format_number(document.width),
        format_number(document.height),
        len(document.elements),
    )
    return Image(document=document, ascent="center", scale=1.0)


def concat(*images: Image) -> Image:
    """Join images left to right; each is centred vertically on the tallest."""
    width = sum(img.width for img in images)
    height = max((img.height for img in images), default=0.0)
    doc = VectorDocument(width=width, height=height)
    x = 0.0
    for img in images:
        dy = (height - img.height) / 2
        doc.group(
            img.document.elements,
            transform=f"translate({format_number(x)},{format_number(dy)})",
        )
        x += img.width
    return render_image(doc)
