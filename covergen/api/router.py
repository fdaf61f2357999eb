"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from covergen.api import cover, health, info

api_router = APIRouter()

api_router.include_router(cover.router)
api_router.include_router(info.router)
api_router.include_router(health.router)
