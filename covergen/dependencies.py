"""FastAPI dependency injection."""

from __future__ import annotations

from covergen.config import settings
from covergen.resolvers.backgrounds import BackgroundResolver
from covergen.resolvers.icons import IconResolver

# Process-wide so the icon cache survives across requests
_icon_resolver: IconResolver | None = None
_background_resolver: BackgroundResolver | None = None


def get_icon_resolver() -> IconResolver:
    global _icon_resolver
    if _icon_resolver is None:
        _icon_resolver = IconResolver(settings)
    return _icon_resolver


def get_background_resolver() -> BackgroundResolver:
    global _background_resolver
    if _background_resolver is None:
        _background_resolver = BackgroundResolver(settings)
    return _background_resolver
