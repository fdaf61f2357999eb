"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from covergen.dependencies import get_icon_resolver
from covergen.engine.patterns import pattern_kinds
from covergen.models.responses import HealthResponse
from covergen.resolvers.icons import IconResolver

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(icons: IconResolver = Depends(get_icon_resolver)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        icon_cache_size=len(icons.cache),
        pattern_kinds=pattern_kinds(),
    )
