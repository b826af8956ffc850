"""Drawables Composer: border -> fill -> content, in that layering order."""

from __future__ import annotations

from svgtag.engine.geometry import BoxGeometry, IconGeometry, ProgressGeometry, TagGeometry
from svgtag.models.icon_document import IconDocument
from svgtag.models.style import Style
from svgtag.svg.document import VectorDocument


def _compose_box(style: Style, box: BoxGeometry) -> VectorDocument:
    doc = VectorDocument(width=box.svg_width, height=box.svg_height)
    border = box.border_rect
    if border is not None:
        doc.rect(border.x, border.y, border.width, border.height, fill=style.stroke, rx=border.rx)
    inner = box.fill_rect
    doc.rect(inner.x, inner.y, inner.width, inner.height, fill=style.background, rx=inner.rx)
    return doc


def compose_tag(label: str, style: Style, geom: TagGeometry) -> VectorDocument:
    doc = _compose_box(style, geom.box)
    doc.text(
        label,
        geom.text_x,
        geom.text_y,
        fill=style.foreground,
        font_family=style.family,
        font_size=geom.font_size,
        font_weight=style.weight,
    )
    doc.title = label
    return doc


def compose_progress(style: Style, geom: ProgressGeometry) -> VectorDocument:
    doc = _compose_box(style, geom.box)
    fill = geom.fill
    doc.rect(fill.x, fill.y, fill.width, fill.height, fill=style.foreground, rx=fill.rx)
    return doc


def compose_icon(
    icon: IconDocument,
    style: Style,
    geom: IconGeometry,
    preserve_fills: bool = False,
) -> VectorDocument:
    """Emit every icon path with one transform.

    Paths are painted with the foreground colour; per-path fills from the
    source are dropped unless ``preserve_fills`` is set.
    """
    doc = _compose_box(style, geom.box)
    transform = geom.transform.to_svg()
    for item in icon.paths:
        fill = item.fill if preserve_fills and item.fill else style.foreground
        doc.path(item.d, fill=fill, transform=transform)
    return doc
