"""Tests for icon fetching, caching and fallback."""

from __future__ import annotations

import asyncio

import httpx

from covergen.resolvers.cache import TTLCache
from covergen.resolvers.icons import IconResolver, IconSource, cache_key
from tests.conftest import CAMERA_SVG, HOME_SVG, StubIconService


def _get(resolver: IconResolver, *args):
    return asyncio.run(resolver.get_icon(*args))


def test_fetches_requested_icon(icon_resolver, icon_service):
    result = _get(icon_resolver, "mdi", "camera", "#ffffff", "100")
    assert result.markup == CAMERA_SVG
    assert result.source is IconSource.FETCHED
    assert icon_service.paths == ["/mdi/camera.svg"]


def test_query_parameters(icon_resolver, icon_service):
    _get(icon_resolver, "mdi", "camera", "red", "80")
    request = icon_service.requests[0]
    assert request.url.host == "api.iconify.design"
    assert request.url.params["height"] == "80"
    assert request.url.params["color"] == "#cf5659"
    assert "color=%23cf5659" in str(request.url)


def test_optional_parameters_omitted(icon_resolver, icon_service):
    _get(icon_resolver, "mdi", "camera", None, None)
    assert icon_service.requests[0].url.query == b""


def test_missing_prefix_or_name_uses_default(icon_resolver, icon_service):
    result = _get(icon_resolver, None, "camera", "#fff", "100")
    assert result.markup == HOME_SVG
    assert (result.prefix, result.name) == ("mdi", "home")
    assert icon_service.paths == ["/mdi/home.svg"]


def test_second_call_served_from_cache(icon_resolver, icon_service):
    first = _get(icon_resolver, "mdi", "camera", "#fff", "100")
    second = _get(icon_resolver, "mdi", "camera", "#fff", "100")
    assert first.markup == second.markup
    assert second.source is IconSource.CACHE
    assert icon_service.calls == 1


def test_cache_key_includes_color_and_size(icon_resolver, icon_service):
    _get(icon_resolver, "mdi", "camera", "#fff", "100")
    _get(icon_resolver, "mdi", "camera", "#000", "100")
    _get(icon_resolver, "mdi", "camera", "#fff", "64")
    assert icon_service.calls == 3
    assert cache_key("mdi", "camera", "#fff", "100") in icon_resolver.cache


def test_unknown_icon_falls_back_to_default(icon_resolver, icon_service):
    result = _get(icon_resolver, "x", "y", "#fff", "100")
    assert result.markup == HOME_SVG
    assert result.source is IconSource.FALLBACK
    assert icon_service.paths == ["/x/y.svg", "/mdi/home.svg"]


def test_default_icon_failure_gives_no_icon(test_settings):
    service = StubIconService()
    resolver = IconResolver(test_settings, transport=service.transport)
    result = _get(resolver, "x", "y", "#fff", "100")
    assert result.markup is None
    assert not result.found
    assert result.source is IconSource.MISSING
    assert service.calls == 2


def test_default_icon_is_not_retried(test_settings):
    service = StubIconService()
    resolver = IconResolver(test_settings, transport=service.transport)
    result = _get(resolver, "mdi", "home", "#fff", "100")
    assert result.markup is None
    assert service.calls == 1


def test_failures_are_not_cached(test_settings):
    service = StubIconService()
    resolver = IconResolver(test_settings, transport=service.transport)
    _get(resolver, "mdi", "home", "#fff", "100")
    service.icons["mdi/home"] = HOME_SVG
    result = _get(resolver, "mdi", "home", "#fff", "100")
    assert result.markup == HOME_SVG
    assert service.calls == 2


def test_non_svg_body_is_a_failure(test_settings):
    service = StubIconService({"mdi/home": HOME_SVG, "bad/icon": "Not found"})
    resolver = IconResolver(test_settings, transport=service.transport)
    result = _get(resolver, "bad", "icon", "#fff", "100")
    assert result.markup == HOME_SVG
    assert result.source is IconSource.FALLBACK


def test_network_error_falls_back(test_settings):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/mdi/home.svg":
            return httpx.Response(200, text=HOME_SVG)
        raise httpx.ConnectError("connection refused", request=request)

    resolver = IconResolver(test_settings, transport=httpx.MockTransport(handler))
    result = _get(resolver, "mdi", "camera", "#fff", "100")
    assert result.markup == HOME_SVG


def test_cache_capacity_is_bounded(test_settings, icon_service):
    resolver = IconResolver(
        test_settings,
        cache=TTLCache(capacity=1, ttl=60),
        transport=icon_service.transport,
    )
    _get(resolver, "mdi", "camera", "#fff", "100")
    _get(resolver, "mdi", "home", "#fff", "100")
    _get(resolver, "mdi", "camera", "#fff", "100")
    assert len(resolver.cache) == 1
    assert icon_service.calls == 3


def test_custom_service_url(icon_service):
    from covergen.config import Settings

    config = Settings(_env_file=None, icon_service_url="https://icons.example.com/")
    resolver = IconResolver(config, transport=icon_service.transport)
    _get(resolver, "mdi", "camera", None, "100")
    assert str(icon_service.requests[0].url) == "https://icons.example.com/mdi/camera.svg?height=100"


def test_injected_cache_is_used(test_settings, icon_service):
    cache: TTLCache[str] = TTLCache(capacity=1, ttl=60)
    resolver = IconResolver(test_settings, cache=cache, transport=icon_service.transport)
    assert resolver.cache is cache
    _get(resolver, "mdi", "camera", "#fff", "100")
    assert len(cache) == 1


def test_control_characters_in_name_fall_back(icon_resolver, icon_service):
    result = _get(icon_resolver, "mdi", "ho\x01me", "#fff", "100")
    assert result.markup == HOME_SVG
    assert result.source is IconSource.FALLBACK
    assert icon_service.paths[-1] == "/mdi/home.svg"


def test_path_segments_are_quoted(icon_resolver, icon_service):
    _get(icon_resolver, "mdi", "a/b c", None, None)
    assert icon_service.requests[0].url.raw_path == b"/mdi/a%2Fb%20c.svg"
