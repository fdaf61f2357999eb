"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from covergen import __version__


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = __version__
    icon_cache_size: int = 0
    pattern_kinds: list[str] = Field(default_factory=list)
