"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svgtag.api import health, icons, images

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(images.router)
api_router.include_router(icons.router)
