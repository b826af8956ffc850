"""Geometry Calculator: box, text, progress-fill and icon-transform coordinates.

All three drawables share one box: ``chars`` character cells wide, 90% of a
text line high, with ``margin`` cells of horizontal slack split evenly on
both sides.
"""

from __future__ import annotations

from dataclasses import dataclass

from svgtag.engine.metrics import FontMetrics
from svgtag.models.icon_document import IconDocument
from svgtag.models.style import Style
from svgtag.utils.affine import Affine, fit_center

# Fraction of the text line height the box occupies.
LINE_HEIGHT_FACTOR = 0.9

# Borders thinner than this are not drawn.
MIN_BORDER_THICKNESS = 0.25

# Icons occupy two character cells.
ICON_CHARS = 2


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    rx: float = 0.0


@dataclass(frozen=True)
class BoxGeometry:
    svg_width: float
    svg_height: float
    box_x: float
    box_y: float
    box_width: float
    box_height: float
    thickness: float
    radius: float

    @property
    def has_border(self) -> bool:
        return self.thickness >= MIN_BORDER_THICKNESS

    @property
    def border_rect(self) -> Rect | None:
        if not self.has_border:
            return None
        return Rect(self.box_x, self.box_y, self.box_width, self.box_height, self.radius)

    @property
    def fill_rect(self) -> Rect:
        """Inner rectangle, concentric with the border whether or not it is drawn."""
        half = self.thickness / 2.0
        return Rect(
            self.box_x + half,
            self.box_y + half,
            self.box_width - self.thickness,
            self.box_height - self.thickness,
            self.radius - half,
        )

    @property
    def center(self) -> tuple[float, float]:
        return (self.box_x + self.box_width / 2, self.box_y + self.box_height / 2)


@dataclass(frozen=True)
class TagGeometry:
    box: BoxGeometry
    text_x: float
    text_y: float
    font_size: float


@dataclass(frozen=True)
class ProgressGeometry:
    box: BoxGeometry
    fill: Rect


@dataclass(frozen=True)
class IconGeometry:
    box: BoxGeometry
    scale: float
    transform: Affine


def box_geometry(style: Style, metrics: FontMetrics, chars: float) -> BoxGeometry:
    box_width = chars * metrics.char_width
    box_height = metrics.char_height * LINE_HEIGHT_FACTOR
    svg_width = box_width + style.margin * metrics.char_width
    return BoxGeometry(
        svg_width=svg_width,
        svg_height=box_height,
        box_x=(svg_width - box_width) / 2,
        box_y=0.0,
        box_width=box_width,
        box_height=box_height,
        thickness=style.thickness,
        radius=style.radius,
    )


def tag_geometry(label: str, style: Style, metrics: FontMetrics) -> TagGeometry:
    box = box_geometry(style, metrics, len(label) + style.padding)
    info = metrics.font_info(style.family, style.height)
    text_width = len(label) * info.glyph_width
    return TagGeometry(
        box=box,
        text_x=box.box_x + (box.box_width - text_width) / 2,
        text_y=info.ascent,
        font_size=info.size,
    )


def progress_geometry(value: float, style: Style, metrics: FontMetrics) -> ProgressGeometry:
    """Fill width is ``value * box_width - thickness - 2 * padding``.

    ``value`` is not clamped: outside [0, 1] the fill is negative or overflows
    the box, and callers clamp when they need to.
    """
    box = box_geometry(style, metrics, style.width)
    t, p = style.thickness, style.padding
    fill = Rect(
        x=box.box_x + t / 2.0 + p,
        y=box.box_y + t / 2.0 + p,
        width=value * box.box_width - t - 2 * p,
        height=box.box_height - t - 2 * p,
        rx=style.radius - t / 2.0,
    )
    return ProgressGeometry(box=box, fill=fill)


def icon_geometry(icon: IconDocument, style: Style, metrics: FontMetrics) -> IconGeometry:
    box = box_geometry(style, metrics, ICON_CHARS)
    scale = style.scale * (box.box_height / icon.height)
    return IconGeometry(box=box, scale=scale, transform=fit_center(icon.viewbox, box.center, scale))
