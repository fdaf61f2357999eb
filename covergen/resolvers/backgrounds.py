"""Background photo resolution across stock-image providers.

Picsum needs no query: its URL template is the resource, so it doubles as the
fallback for every other provider. Pixabay is a JSON search API. Pexels has no
keyless API, so its search page is scraped for the first photo URL; that
breaks whenever Pexels changes its markup and then degrades to Picsum.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Awaitable
from urllib.parse import quote

import httpx

from covergen.config import Settings, settings
from covergen.engine.config import CoverLayout
from covergen.errors import BackgroundFetchError
from covergen.models.cover import BackgroundRequest

logger = logging.getLogger(__name__)

PICSUM = "picsum"
PIXABAY = "pixabay"
PEXELS = "pexels"

_PEXELS_PHOTO_RE = re.compile(r'"https://images\.pexels\.com/photos/[^"]+?"')

# Pixabay returns up to this many hits; only the first is used.
_PIXABAY_PER_PAGE = 3


@dataclass(frozen=True)
class BackgroundResolution:
    url: str
    provider: str
    fallback: bool = False


class BackgroundResolver:
    def __init__(
        self,
        config: Settings | None = None,
        layout: CoverLayout | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or settings
        self.layout = layout or CoverLayout()
        self._transport = transport

    async def resolve(self, background: BackgroundRequest) -> BackgroundResolution | None:
        """Photo URL for the request, or None when no photo was asked for."""
        if not background.requested:
            return None

        service = (background.service or PICSUM).strip().lower()
        try:
            if service == PIXABAY and background.keyword:
                return await self._keyword_or_fallback(
                    PIXABAY, self._pixabay(background.keyword), background.photo_id
                )
            if service == PEXELS and background.keyword:
                return await self._keyword_or_fallback(
                    PEXELS, self._pexels(background.keyword), background.photo_id
                )
            return BackgroundResolution(self.picsum_url(background.photo_id), PICSUM)
        except Exception:
            logger.exception("Background resolution failed, using random Picsum photo")
            return BackgroundResolution(self.picsum_url(None), PICSUM, fallback=True)

    async def _keyword_or_fallback(
        self,
        provider: str,
        search: Awaitable[str | None],
        photo_id: str | None,
    ) -> BackgroundResolution:
        try:
            url = await search
        except BackgroundFetchError as e:
            logger.warning("%s", e)
            url = None
        if url:
            return BackgroundResolution(url, provider)
        logger.info("No %s photo found, falling back to Picsum", provider)
        return BackgroundResolution(self.picsum_url(photo_id), PICSUM, fallback=True)

    def picsum_url(self, photo_id: str | None) -> str:
        base = self.config.picsum_url.rstrip("/")
        w, h = self.layout.canvas_width, self.layout.canvas_height
        if photo_id:
            return f"{base}/id/{photo_id}/{w}/{h}"
        # Picsum picks a random photo server-side
        return f"{base}/{w}/{h}"

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.config.http_timeout,
            follow_redirects=True,
            transport=self._transport,
        )

    async def _pixabay(self, keyword: str) -> str | None:
        if not self.config.pixabay_api_key:
            raise BackgroundFetchError(PIXABAY, "PIXABAY_API_KEY is not configured")

        params = {
            "key": self.config.pixabay_api_key,
            "q": keyword,
            "image_type": "photo",
            "orientation": "horizontal",
            "min_width": str(self.layout.canvas_width),
            "min_height": str(self.layout.canvas_height),
            "per_page": str(_PIXABAY_PER_PAGE),
        }
        try:
            async with self._client() as client:
                resp = await client.get(self.config.pixabay_api_url, params=params)
                resp.raise_for_status()
                data = resp.json()
        except (httpx.HTTPError, ValueError) as e:
            raise BackgroundFetchError(PIXABAY, str(e)) from e

        if not isinstance(data, dict):
            raise BackgroundFetchError(PIXABAY, "unexpected response shape")
        hits = data.get("hits") or []
        if not hits:
            return None
        return hits[0].get("largeImageURL") or None

    async def _pexels(self, keyword: str) -> str | None:
        url = f"{self.config.pexels_search_url.rstrip('/')}/{quote(keyword, safe='')}/"
        try:
            async with self._client() as client:
                resp = await client.get(url)
                resp.raise_for_status()
        except httpx.HTTPError as e:
            raise BackgroundFetchError(PEXELS, str(e)) from e

        match = _PEXELS_PHOTO_RE.search(resp.text)
        if match is None:
            return None
        return match.group(0).strip('"')
