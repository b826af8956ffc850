"""RenderContext: the immutable configuration every public operation runs against."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

from svgtag.config import Settings, settings as default_settings
from svgtag.engine.metrics import FixedMetrics, FontMetrics, PillowMetrics
from svgtag.engine.style import ColorResolver, PillowColorResolver, resolve
from svgtag.icons.cache import IconCache
from svgtag.icons.collections import CollectionRegistry
from svgtag.icons.fetcher import UrlFetcher
from svgtag.icons.loader import IconLoader
from svgtag.models.style import DEFAULT_STYLE, Style


@dataclass(frozen=True)
class RenderContext:
    metrics: FontMetrics
    icons: IconLoader
    color_resolver: ColorResolver = field(default_factory=PillowColorResolver)
    default_style: Style = DEFAULT_STYLE
    # Named styles selectable by passing their name as ``style``
    styles: Mapping[str, Style] = field(default_factory=lambda: MappingProxyType({}))


def build_context(cfg: Settings) -> RenderContext:
    """Assemble a RenderContext from settings."""
    if cfg.svgtag_metrics == "pillow":
        metrics: FontMetrics = PillowMetrics(cfg.svgtag_char_width, cfg.svgtag_char_height)
    else:
        metrics = FixedMetrics(cfg.svgtag_char_width, cfg.svgtag_char_height)

    registry = CollectionRegistry()
    for collection, template in cfg.svgtag_collections.items():
        registry = registry.with_collection(collection, template)
    fetcher = UrlFetcher(timeout=cfg.svgtag_fetch_timeout, user_agent=cfg.svgtag_user_agent)
    cache = IconCache(cfg.svgtag_cache_dir, fetcher)

    color_resolver = PillowColorResolver()
    styles = {
        name: resolve(DEFAULT_STYLE, partial, color_resolver=color_resolver)
        for name, partial in cfg.svgtag_styles.items()
    }
    return RenderContext(
        metrics=metrics,
        icons=IconLoader(registry, cache),
        color_resolver=color_resolver,
        styles=MappingProxyType(styles),
    )


@lru_cache(maxsize=1)
def default_context() -> RenderContext:
    """Process-wide context, built once from the environment settings."""
    return build_context(default_settings)
