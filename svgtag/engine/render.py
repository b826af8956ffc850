"""Public operations: tags, progress bars and icons as grid-aligned images."""

from __future__ import annotations

import logging
from typing import Any

from svgtag.engine.composer import compose_icon, compose_progress, compose_tag
from svgtag.engine.context import RenderContext, default_context
from svgtag.engine.geometry import icon_geometry, progress_geometry, tag_geometry
from svgtag.engine.style import resolve
from svgtag.models.icon_document import IconDocument
from svgtag.models.style import Style
from svgtag.svg.image import Image, render_image

logger = logging.getLogger(__name__)


def resolve_style(style: Any, overrides: Any, context: RenderContext) -> Style:
    """Base style (named, full or partial) with ``overrides`` applied on top."""
    if isinstance(style, str):
        base = context.styles.get(style)
        if base is None:
            logger.warning("Unknown style %r, using the default style", style)
            base = context.default_style
    elif isinstance(style, Style):
        base = style
    else:
        base = resolve(context.default_style, style, color_resolver=context.color_resolver)
    return resolve(base, overrides, color_resolver=context.color_resolver)


def make_tag(
    label: str,
    style: Any = None,
    *,
    context: RenderContext | None = None,
    **overrides: Any,
) -> Image:
    """Rounded box with ``label`` centred in it."""
    ctx = context or default_context()
    resolved = resolve_style(style, overrides, ctx)
    geom = tag_geometry(label, resolved, ctx.metrics)
    return render_image(compose_tag(label, resolved, geom))


def make_progress_bar(
    value: float,
    style: Any = None,
    *,
    context: RenderContext | None = None,
    **overrides: Any,
) -> Image:
    """Horizontal bar filled to ``value`` (a fraction, not clamped)."""
    ctx = context or default_context()
    resolved = resolve_style(style, overrides, ctx)
    geom = progress_geometry(value, resolved, ctx.metrics)
    return render_image(compose_progress(resolved, geom))


def make_icon(
    collection: str,
    name: str,
    style: Any = None,
    *,
    context: RenderContext | None = None,
    force_reload: bool = False,
    preserve_fills: bool = False,
    **overrides: Any,
) -> Image:
    """Icon ``name`` from ``collection``, scaled and centred in a two-cell box."""
    ctx = context or default_context()
    resolved = resolve_style(style, overrides, ctx)
    icon = ctx.icons.get(collection, name, force_reload=force_reload)
    geom = icon_geometry(icon, resolved, ctx.metrics)
    return render_image(compose_icon(icon, resolved, geom, preserve_fills=preserve_fills))


def get_icon_data(
    collection: str,
    name: str,
    force_reload: bool = False,
    *,
    context: RenderContext | None = None,
) -> IconDocument:
    """Parsed icon, fetched or reloaded into the cache as needed."""
    ctx = context or default_context()
    return ctx.icons.get(collection, name, force_reload=force_reload)
