"""FastAPI dependency injection."""

from __future__ import annotations

from svgtag.engine.context import RenderContext, default_context


def get_context() -> RenderContext:
    return default_context()
