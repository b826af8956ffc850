"""svgtag rendering engine."""

from svgtag.engine.context import RenderContext, build_context, default_context
from svgtag.engine.render import get_icon_data, make_icon, make_progress_bar, make_tag

__all__ = [
    "RenderContext",
    "build_context",
    "default_context",
    "get_icon_data",
    "make_icon",
    "make_progress_bar",
    "make_tag",
]
