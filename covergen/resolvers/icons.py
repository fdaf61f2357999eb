"""Icon markup from the Iconify API, cached, with a default-icon fallback."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from urllib.parse import quote

import httpx

from covergen.config import Settings, settings
from covergen.engine.colors import resolve_color
from covergen.errors import IconFetchError
from covergen.resolvers.cache import TTLCache

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "mdi"
DEFAULT_NAME = "home"


class IconSource(str, enum.Enum):
    CACHE = "cache"
    FETCHED = "fetched"
    FALLBACK = "fallback"
    MISSING = "missing"


@dataclass(frozen=True)
class IconResolution:
    markup: str | None
    prefix: str
    name: str
    source: IconSource

    @property
    def found(self) -> bool:
        return self.markup is not None


def cache_key(prefix: str, name: str, color: str | None, size: str | None) -> str:
    return f"{prefix}:{name}:{color}:{size}"


class IconResolver:
    """Fetches icons one at a time; only successful fetches are cached."""

    def __init__(
        self,
        config: Settings | None = None,
        cache: TTLCache[str] | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or settings
        if cache is None:
            cache = TTLCache(
                capacity=self.config.icon_cache_capacity,
                ttl=self.config.icon_cache_ttl_seconds,
            )
        self.cache = cache
        self._transport = transport

    async def get_icon(
        self,
        prefix: str | None = None,
        name: str | None = None,
        color: str | None = None,
        size: str | None = None,
    ) -> IconResolution:
        if not prefix or not name:
            prefix, name = DEFAULT_PREFIX, DEFAULT_NAME

        key = cache_key(prefix, name, color, size)
        cached = self.cache.get(key)
        if cached is not None:
            return IconResolution(cached, prefix, name, IconSource.CACHE)

        try:
            markup = await self._fetch(prefix, name, color, size)
        except IconFetchError as e:
            logger.warning("%s", e)
            if (prefix, name) != (DEFAULT_PREFIX, DEFAULT_NAME):
                logger.info("Falling back to default icon %s/%s", DEFAULT_PREFIX, DEFAULT_NAME)
                fallback = await self.get_icon(DEFAULT_PREFIX, DEFAULT_NAME, color, size)
                if fallback.found:
                    return IconResolution(fallback.markup, DEFAULT_PREFIX, DEFAULT_NAME, IconSource.FALLBACK)
                return fallback
            return IconResolution(None, prefix, name, IconSource.MISSING)

        self.cache.set(key, markup)
        return IconResolution(markup, prefix, name, IconSource.FETCHED)

    async def _fetch(self, prefix: str, name: str, color: str | None, size: str | None) -> str:
        params: dict[str, str] = {}
        if size:
            params["height"] = size
        if color:
            # httpx encodes the leading '#' as %23
            params["color"] = resolve_color(color)

        url = (
            f"{self.config.icon_service_url.rstrip('/')}"
            f"/{quote(prefix, safe='')}/{quote(name, safe='')}.svg"
        )
        try:
            async with httpx.AsyncClient(
                timeout=self.config.http_timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                resp = await client.get(url, params=params)
                resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise IconFetchError(prefix, name, str(e)) from e

        markup = resp.text.strip()
        if "<svg" not in markup:
            raise IconFetchError(prefix, name, "response is not SVG markup")
        logger.debug("Fetched icon %s/%s (%d bytes)", prefix, name, len(markup))
        return markup
