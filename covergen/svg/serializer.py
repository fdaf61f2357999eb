"""Write cover SVG markup from composed parts."""

from __future__ import annotations

import math
from xml.sax.saxutils import escape

XML_PROLOG = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'
SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"


def format_number(value: float) -> str:
    """Render a number the way the browser-side preview page does (``50``, ``33.5``, ``NaN``)."""
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)


def escape_attr(value: str) -> str:
    return escape(value, {'"': "&quot;"})


def escape_text(value: str) -> str:
    return escape(value)


def attr_string(attrs: dict[str, object]) -> str:
    parts = []
    for key, value in attrs.items():
        if value is None:
            continue
        rendered = format_number(value) if isinstance(value, (int, float)) else str(value)
        parts.append(f'{key}="{rendered}"')
    return " ".join(parts)


def empty_element(tag: str, attrs: dict[str, object]) -> str:
    return f"<{tag} {attr_string(attrs)} />"


def serialize_cover(
    defs: list[str],
    background: str,
    content: list[str],
    canvas_w: float,
    canvas_h: float,
    content_x: float,
    content_y: float,
) -> str:
    """Assemble the final document: prolog, root, defs, background, content group."""
    w = format_number(canvas_w)
    h = format_number(canvas_h)
    lines = [
        XML_PROLOG,
        f'<svg width="{w}px" height="{h}px" viewBox="0 0 {w} {h}" version="1.1"'
        f' xmlns="{SVG_NS}" xmlns:xlink="{XLINK_NS}">',
        "  <defs>",
    ]
    lines.extend(f"    {d}" for d in defs)
    lines.append("  </defs>")
    lines.append(f"  {background}")
    lines.append(
        f'  <g transform="translate({format_number(content_x)}, {format_number(content_y)})">'
    )
    lines.extend(f"    {c}" for c in content)
    lines.append("  </g>")
    lines.append("</svg>")
    return "\n".join(lines)
