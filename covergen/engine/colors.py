"""Color tokens -> canonical hex.

A token is whatever the caller put between commas in ``bgcolor``/``textcolor``:
a name from the palette below, a 3- or 6-digit hex value, or a ``#``-prefixed
value. Resolution is total: anything unparseable becomes ``DEFAULT_COLOR``.
"""

from __future__ import annotations

import enum
import logging
import math
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_COLOR = "#4F46E5"

# Soft palette tuned for banner backgrounds, not the CSS named colors.
NAMED_COLORS: dict[str, str] = {
    "red": "#cf5659",
    "green": "#6bbf59",
    "pink": "#f28ab2",
    "yellow": "#f5d45e",
    "blue": "#5aa9e6",
    "cyan": "#5ed6e0",
    "purple": "#9b72cf",
    "orange": "#f29e4c",
    "lime": "#b5d95a",
    "teal": "#3fa7a0",
    "black": "#000000",
    "white": "#ffffff",
    "gray": "#8e8e93",
    "brown": "#a0785a",
    "navy": "#2c3e70",
    "violet": "#b28dff",
    "indigo": "#5c6bc0",
    "gold": "#e6b93c",
    "silver": "#c0c4cc",
    "magenta": "#d65db1",
}

_HEX3_RE = re.compile(r"^[0-9a-fA-F]{3}$")
_HEX6_RE = re.compile(r"^[0-9a-fA-F]{6}$")


class ColorSource(str, enum.Enum):
    NAMED = "named"
    HEX = "hex"
    DEFAULT = "default"


@dataclass(frozen=True)
class ColorResolution:
    """A resolved color plus the rule that produced it."""

    hex: str
    source: ColorSource

    @property
    def defaulted(self) -> bool:
        return self.source is ColorSource.DEFAULT


def resolve_color_result(token: str | None) -> ColorResolution:
    """Resolve a token, reporting whether the value fell back to the default."""
    value = (token or "").strip()

    named = NAMED_COLORS.get(value.lower())
    if named is not None:
        return ColorResolution(named, ColorSource.NAMED)

    if value.startswith("#"):
        return ColorResolution(value, ColorSource.HEX)

    if _HEX3_RE.match(value):
        return ColorResolution("#" + "".join(ch * 2 for ch in value), ColorSource.HEX)

    if _HEX6_RE.match(value):
        return ColorResolution("#" + value, ColorSource.HEX)

    logger.debug("Unrecognized color token %r, using %s", token, DEFAULT_COLOR)
    return ColorResolution(DEFAULT_COLOR, ColorSource.DEFAULT)


def resolve_color(token: str | None) -> str:
    return resolve_color_result(token).hex


def split_tokens(value: str | None) -> list[str]:
    """Split a comma-joined color list, dropping empty entries."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


def _to_rgb(hex_color: str) -> tuple[int, int, int]:
    digits = hex_color.lstrip("#")
    if _HEX3_RE.match(digits):
        digits = "".join(ch * 2 for ch in digits)
    if not _HEX6_RE.match(digits):
        digits = DEFAULT_COLOR.lstrip("#")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def lighten(hex_color: str, percent: float) -> str:
    """Move each channel toward 255 by ``percent`` (0-100)."""
    if percent == 0:
        return hex_color

    channels = []
    for c in _to_rgb(hex_color):
        value = c + (255 - c) * percent / 100
        # Half-up rounding, not banker's rounding
        value = min(255, max(0, math.floor(value + 0.5)))
        channels.append(f"{value:02x}")
    return "#" + "".join(channels)
