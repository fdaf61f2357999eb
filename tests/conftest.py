"""Shared test fixtures and stubbed outbound services."""

from __future__ import annotations

import httpx
import pytest

from covergen.config import Settings
from covergen.resolvers.backgrounds import BackgroundResolver
from covergen.resolvers.icons import IconResolver


HOME_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 24 24"><path fill="#ffffff" d="M10 20v-6h4v6h5v-8h3L12 3L2 12h3v8z"/></svg>'''

CAMERA_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 24 24"><path fill="#ffffff" d="M4 4h3l2-2h6l2 2h3a2 2 0 0 1 2 2v12a2 2 0 0 1-2 2H4a2 2 0 0 1-2-2V6a2 2 0 0 1 2-2m8 3a5 5 0 1 0 0 10a5 5 0 0 0 0-10"/></svg>'''

PEXELS_PAGE = '''<html><body>
<script>window.__DATA__ = {"photos":[{"src":"https://images.pexels.com/photos/1029604/pexels-photo-1029604.jpeg?auto=compress&w=1500"},
{"src":"https://images.pexels.com/photos/2000/second.jpeg"}]}</script>
</body></html>'''


class StubIconService:
    """Iconify stand-in: serves the icons it knows, 404 for the rest."""

    def __init__(self, icons: dict[str, str] | None = None) -> None:
        self.icons = dict(icons or {})
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = request.url.path.strip("/").removesuffix(".svg")
        markup = self.icons.get(key)
        if markup is None:
            return httpx.Response(404, text="404")
        return httpx.Response(200, text=markup, headers={"content-type": "image/svg+xml"})

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


class StubPhotoService:
    """Routes requests by host to per-test handlers; unknown hosts get a 503."""

    def __init__(self, handlers: dict[str, object] | None = None) -> None:
        self.handlers = dict(handlers or {})
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.handlers.get(request.url.host)
        if handler is None:
            return httpx.Response(503, text="unavailable")
        return handler(request)

    @property
    def calls(self) -> int:
        return len(self.requests)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(_env_file=None, pixabay_api_key="test-key")


@pytest.fixture
def icon_service() -> StubIconService:
    return StubIconService({"mdi/home": HOME_SVG, "mdi/camera": CAMERA_SVG})


@pytest.fixture
def icon_resolver(test_settings, icon_service) -> IconResolver:
    return IconResolver(test_settings, transport=icon_service.transport)


@pytest.fixture
def photo_service() -> StubPhotoService:
    return StubPhotoService()


@pytest.fixture
def background_resolver(test_settings, photo_service) -> BackgroundResolver:
    return BackgroundResolver(test_settings, transport=photo_service.transport)
