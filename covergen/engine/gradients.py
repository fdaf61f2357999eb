"""Linear gradient definitions with evenly spaced stops."""

from __future__ import annotations

from covergen.engine.colors import lighten, resolve_color
from covergen.svg.serializer import empty_element, format_number

# Percent added toward white when a single color needs a second stop.
_SINGLE_COLOR_LIGHTEN = 20


def gradient_stops(tokens: list[str]) -> list[tuple[float, str]]:
    """Resolve tokens into (offset percent, hex) pairs."""
    if not tokens:
        raise ValueError("A gradient needs at least one color")

    colors = [resolve_color(t) for t in tokens]
    if len(colors) == 1:
        colors.append(lighten(colors[0], _SINGLE_COLOR_LIGHTEN))

    last = len(colors) - 1
    return [(i * 100 / last, color) for i, color in enumerate(colors)]


def build_gradient(tokens: list[str], gradient_id: str) -> str:
    """Diagonal (top-left to bottom-right) ``<linearGradient>`` markup."""
    stops = "".join(
        empty_element("stop", {"offset": f"{format_number(offset)}%", "stop-color": color})
        for offset, color in gradient_stops(tokens)
    )
    return (
        f'<linearGradient id="{gradient_id}" x1="0%" y1="0%" x2="100%" y2="100%">'
        f"{stops}</linearGradient>"
    )
