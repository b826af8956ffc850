"""Icon parser: fetched SVG bytes -> IconDocument.

Only the root viewBox and the ``<path>`` elements are kept; everything else
in the icon (groups, styles, metadata) is ignored.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET

from svgpathtools import parse_path

from svgtag.errors import IconParseError, MissingViewboxError
from svgtag.models.icon_document import IconDocument, IconPath

logger = logging.getLogger(__name__)

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


def _local_name(tag: str) -> str:
    """Strip the ``{namespace}`` prefix ElementTree puts on tag names."""
    return tag.rsplit("}", 1)[-1]


def parse_viewbox(value: str) -> tuple[float, float, float, float]:
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(value.strip()) if p]
    if len(parts) != 4:
        raise IconParseError(f"viewBox must have 4 numbers, got {value!r}")
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError as e:
        raise IconParseError(f"Invalid viewBox {value!r}: {e}") from e
    if w <= 0 or h <= 0:
        raise IconParseError(f"viewBox has non-positive size: {value!r}")
    return (x, y, w, h)


def parse_icon(data: bytes, source_url: str = "") -> IconDocument:
    """Parse raw icon bytes into an IconDocument."""
    source = source_url or "<bytes>"
    try:
        root = ET.fromstring(data)
    except ET.ParseError as e:
        raise IconParseError(f"Malformed SVG from {source}: {e}") from e

    viewbox = root.get("viewBox")
    if viewbox is None:
        raise MissingViewboxError(f"No viewBox on <{_local_name(root.tag)}> from {source}")

    paths: list[IconPath] = []
    for elem in root.iter():
        if _local_name(elem.tag) != "path":
            continue
        d = elem.get("d", "").strip()
        if not d:
            continue
        try:
            parse_path(d)
        except Exception as e:
            logger.warning("Skipping unparsable path in %s: %s", source, e)
            continue
        paths.append(IconPath(d=d, fill=elem.get("fill")))

    doc = IconDocument(viewbox=parse_viewbox(viewbox), paths=tuple(paths), source_url=source_url)
    logger.info("Parsed icon %s: %d paths, viewBox %s", source, len(paths), doc.viewbox)
    return doc


def ink_bounds(doc: IconDocument) -> tuple[float, float, float, float] | None:
    """Union (xmin, ymin, xmax, ymax) of the icon's path geometry, in viewBox units.

    Path data svgpathtools cannot read is left out with a warning; None when
    nothing measurable remains.
    """
    boxes: list[tuple[float, float, float, float]] = []
    for item in doc.paths:
        try:
            path = parse_path(item.d)
            if len(path) == 0:
                continue
            xmin, xmax, ymin, ymax = path.bbox()
        except Exception as e:
            logger.warning("Failed to measure path in %s: %s", doc.source_url or "icon", e)
            continue
        boxes.append((xmin, ymin, xmax, ymax))

    if not boxes:
        return None
    return (
        float(min(b[0] for b in boxes)),
        float(min(b[1] for b in boxes)),
        float(max(b[2] for b in boxes)),
        float(max(b[3] for b in boxes)),
    )
