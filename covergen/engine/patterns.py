"""Tileable background patterns.

Every pattern kind is a small function registered via decorator:

    @pattern_kind("dots", width=20, height=20)
    def dots(main: str, second: str) -> str:
        return f'<circle cx="10" cy="10" r="2" fill="{second}"/>'

The function returns only the tile's foreground; the registry wraps it in a
``<pattern>`` element with a full-tile background rect in the main color.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from covergen.engine.colors import DEFAULT_COLOR, lighten, resolve_color
from covergen.svg.serializer import format_number

logger = logging.getLogger(__name__)

# Second color derived from the first when only one is given.
_SECOND_COLOR_LIGHTEN = 30


@dataclass
class PatternSpec:
    kind: str
    width: float
    height: float
    fn: Callable[[str, str], str]


@dataclass(frozen=True)
class PatternDefinition:
    definition: str
    fill: str

    @property
    def is_pattern(self) -> bool:
        return bool(self.definition)


_patterns: dict[str, PatternSpec] = {}


def pattern_kind(kind: str, *, width: float, height: float):
    """Decorator to register a pattern tile."""

    def decorator(fn: Callable[[str, str], str]):
        if kind in _patterns:
            raise ValueError(f"Duplicate pattern kind: {kind}")
        _patterns[kind] = PatternSpec(kind=kind, width=width, height=height, fn=fn)
        return fn

    return decorator


def pattern_kinds() -> list[str]:
    return list(_patterns)


@pattern_kind("grid", width=40, height=40)
def _grid(main: str, second: str) -> str:
    return f'<path d="M 40 0 L 0 0 0 40" fill="none" stroke="{second}" stroke-width="1"/>'


@pattern_kind("dots", width=20, height=20)
def _dots(main: str, second: str) -> str:
    return f'<circle cx="10" cy="10" r="2" fill="{second}"/>'


@pattern_kind("diagonal", width=40, height=40)
def _diagonal(main: str, second: str) -> str:
    return f'<path d="M0 40L40 0" stroke="{second}" stroke-width="1"/>'


@pattern_kind("waves", width=100, height=20)
def _waves(main: str, second: str) -> str:
    return (
        f'<path d="M0 10C20 5, 30 15, 50 10C70 5, 80 15, 100 10"'
        f' stroke="{second}" stroke-width="1" fill="none"/>'
    )


@pattern_kind("hexagons", width=50, height=43.4)
def _hexagons(main: str, second: str) -> str:
    return (
        f'<path d="M25 0L50 14.4v28.9L25 43.3L0 28.9V14.4z"'
        f' stroke="{second}" stroke-width="1" fill="none"/>'
    )


def build_pattern(kind: str | None, colors: list[str]) -> PatternDefinition:
    """Pattern definition for ``kind`` in one or two colors.

    Unknown kinds return an empty definition and a CSS gradient as fill,
    which is not valid inside SVG; callers check ``is_pattern`` first.
    """
    main = resolve_color(colors[0] if colors else DEFAULT_COLOR)
    second = resolve_color(colors[1]) if len(colors) > 1 else lighten(main, _SECOND_COLOR_LIGHTEN)

    spec = _patterns.get((kind or "").strip().lower())
    if spec is None:
        if kind:
            logger.debug("Unknown pattern kind %r", kind)
        return PatternDefinition(definition="", fill=f"linear-gradient(135deg, {main}, {second})")

    w = format_number(spec.width)
    h = format_number(spec.height)
    definition = (
        f'<pattern id="pattern-{spec.kind}" width="{w}" height="{h}" patternUnits="userSpaceOnUse">'
        f'<rect width="{w}" height="{h}" fill="{main}"/>'
        f"{spec.fn(main, second)}"
        "</pattern>"
    )
    return PatternDefinition(definition=definition, fill=f"url(#pattern-{spec.kind})")
