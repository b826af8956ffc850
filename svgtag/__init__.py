"""Grid-aligned SVG tags, progress bars and icons for inlining into text."""

from svgtag.engine import (
    RenderContext,
    build_context,
    default_context,
    get_icon_data,
    make_icon,
    make_progress_bar,
    make_tag,
)
from svgtag.engine.style import resolve
from svgtag.errors import (
    FetchError,
    IconParseError,
    MissingViewboxError,
    SvgTagError,
    UnknownCollectionError,
)
from svgtag.models.icon_document import IconDocument, IconPath
from svgtag.models.style import DEFAULT_STYLE, Style, StyleOverrides
from svgtag.svg.image import Image, concat

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_STYLE",
    "FetchError",
    "IconDocument",
    "IconParseError",
    "IconPath",
    "Image",
    "MissingViewboxError",
    "RenderContext",
    "Style",
    "StyleOverrides",
    "SvgTagError",
    "UnknownCollectionError",
    "build_context",
    "concat",
    "default_context",
    "get_icon_data",
    "make_icon",
    "make_progress_bar",
    "make_tag",
    "resolve",
]
