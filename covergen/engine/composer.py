"""Cover composition: resolve colors and resources, lay out, serialize.

Per request:
    1. split + resolve background/text color tokens
    2. gradients for multi-color backgrounds/text
    3. icon and background photo, resolved concurrently
    4. defs (gradients, pattern) and the background primitive
    5. content block geometry (icon + text centered in the content box)
    6. serialize

Every resolver degrades instead of raising, so the only way compose() fails
is a genuine bug; the HTTP layer turns that into a 500.
"""

from __future__ import annotations

import asyncio
import logging
import math
import re
from dataclasses import dataclass

from covergen.engine.colors import resolve_color, split_tokens
from covergen.engine.config import CoverLayout
from covergen.engine.gradients import build_gradient
from covergen.engine.patterns import build_pattern
from covergen.models.cover import CoverRequest
from covergen.resolvers.backgrounds import BackgroundResolution, BackgroundResolver
from covergen.resolvers.icons import IconResolution, IconResolver
from covergen.svg.serializer import empty_element, escape_attr, escape_text, format_number, serialize_cover

logger = logging.getLogger(__name__)

BG_GRADIENT_ID = "bgGradient"
TEXT_GRADIENT_ID = "textGradient"

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: str | None) -> float:
    """Leading-integer parse; NaN when there are no leading digits.

    ``"100px"`` gives 100. Non-numeric sizes are not rejected: they flow into
    the geometry as NaN and produce a degenerate (but well-formed) document.
    """
    if value is None:
        return math.nan
    match = _LEADING_INT_RE.match(value)
    if match is None:
        return math.nan
    return float(int(match.group(1)))


@dataclass(frozen=True)
class ContentGeometry:
    start_x: float
    start_y: float
    icon_width: float
    icon_y: float
    text_x: float
    text_y: float
    text_width: float

    @property
    def total_width(self) -> float:
        return self.icon_width + self.text_width


def layout_content(
    content: str,
    icon_size: float,
    text_size: float,
    has_icon: bool,
    layout: CoverLayout,
) -> ContentGeometry:
    """Center the icon + text block horizontally in the content box.

    Text width is estimated, not measured; long titles overflow the box
    unclipped.
    """
    icon_width = icon_size + layout.icon_gap if has_icon else 0
    text_width = len(content) * text_size * layout.char_width_factor
    start_x = layout.content_x + (layout.content_width - (icon_width + text_width)) / 2
    return ContentGeometry(
        start_x=start_x,
        start_y=layout.content_y,
        icon_width=icon_width,
        icon_y=(layout.content_height - icon_size) / 2,
        text_x=icon_width if has_icon else 0,
        text_y=layout.content_height / 2,
        text_width=text_width,
    )


class CoverComposer:
    def __init__(
        self,
        icons: IconResolver,
        backgrounds: BackgroundResolver,
        layout: CoverLayout | None = None,
    ) -> None:
        self.icons = icons
        self.backgrounds = backgrounds
        self.layout = layout or CoverLayout()

    async def compose(self, req: CoverRequest) -> str:
        layout = self.layout

        bg_tokens = split_tokens(req.bg_color) or [layout.default_bg_color]
        text_tokens = split_tokens(req.text_color) or [layout.default_text_color]
        bg_colors = [resolve_color(t) for t in bg_tokens]
        text_colors = [resolve_color(t) for t in text_tokens]

        icon_color_tokens = split_tokens(req.icon_color)
        final_icon_color = resolve_color(icon_color_tokens[0]) if icon_color_tokens else text_colors[0]

        icon, photo = await self._resolve_resources(req, final_icon_color)

        defs: list[str] = []
        if len(bg_colors) > 1:
            defs.append(build_gradient(bg_colors, BG_GRADIENT_ID))
        if len(text_colors) > 1:
            defs.append(build_gradient(text_colors, TEXT_GRADIENT_ID))

        background_style = f"url(#{BG_GRADIENT_ID})" if len(bg_colors) > 1 else bg_colors[0]
        if req.pattern:
            pattern = build_pattern(req.pattern, bg_colors)
            if pattern.is_pattern:
                defs.append(pattern.definition)
                background_style = pattern.fill

        if photo is not None:
            background = empty_element(
                "image",
                {
                    "width": layout.canvas_width,
                    "height": layout.canvas_height,
                    "xlink:href": escape_attr(photo.url),
                },
            )
        else:
            background = empty_element(
                "rect",
                {"width": layout.canvas_width, "height": layout.canvas_height, "fill": background_style},
            )

        icon_size = parse_int(req.icon_size)
        text_size = parse_int(req.text_size)
        geometry = layout_content(req.content, icon_size, text_size, icon.found, layout)

        content: list[str] = []
        if icon.found:
            content.append(
                f'<g transform="translate(0, {format_number(geometry.icon_y)})">{icon.markup}</g>'
            )

        text_fill = f"url(#{TEXT_GRADIENT_ID})" if len(text_colors) > 1 else text_colors[0]
        content.append(
            "<text "
            f'x="{format_number(geometry.text_x)}" '
            f'y="{format_number(geometry.text_y)}" '
            f'font-family="{escape_attr(req.font)}" '
            f'font-size="{escape_attr(req.text_size)}" '
            f'font-weight="{layout.font_weight}" '
            'dominant-baseline="central" '
            f'fill="{text_fill}"'
            f">{escape_text(req.content)}</text>"
        )

        logger.debug(
            "Composed cover: icon=%s/%s (%s) photo=%s width=%.1f",
            icon.prefix,
            icon.name,
            icon.source.value,
            photo.provider if photo else None,
            geometry.total_width,
        )

        return serialize_cover(
            defs=defs,
            background=background,
            content=content,
            canvas_w=layout.canvas_width,
            canvas_h=layout.canvas_height,
            content_x=geometry.start_x,
            content_y=geometry.start_y,
        )

    async def _resolve_resources(
        self, req: CoverRequest, icon_color: str
    ) -> tuple[IconResolution, BackgroundResolution | None]:
        """Icon and photo lookups are independent, so run them together."""
        if req.background.requested:
            icon, photo = await asyncio.gather(
                self.icons.get_icon(req.icon_prefix, req.icon_name, icon_color, req.icon_size),
                self.backgrounds.resolve(req.background),
            )
            return icon, photo
        icon = await self.icons.get_icon(req.icon_prefix, req.icon_name, icon_color, req.icon_size)
        return icon, None


async def generate_svg(
    req: CoverRequest,
    icons: IconResolver | None = None,
    backgrounds: BackgroundResolver | None = None,
) -> str:
    """Convenience wrapper around CoverComposer with process-wide resolvers."""
    from covergen.dependencies import get_background_resolver, get_icon_resolver

    composer = CoverComposer(
        icons=icons or get_icon_resolver(),
        backgrounds=backgrounds or get_background_resolver(),
    )
    return await composer.compose(req)
