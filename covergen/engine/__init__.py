"""Cover composition engine: colors, gradients, patterns, layout."""

from covergen.engine.colors import lighten, resolve_color, resolve_color_result
from covergen.engine.config import CoverLayout
from covergen.engine.gradients import build_gradient
from covergen.engine.patterns import build_pattern, pattern_kinds

__all__ = [
    "lighten",
    "resolve_color",
    "resolve_color_result",
    "CoverLayout",
    "build_gradient",
    "build_pattern",
    "pattern_kinds",
]
