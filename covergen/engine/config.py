"""Cover layout constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CoverLayout:
    """Canvas and content-box geometry plus request defaults."""

    canvas_width: int = 1500
    canvas_height: int = 600

    # Region the icon + text block is centered in
    content_width: int = 1170
    content_height: int = 230

    # Space between icon and text
    icon_gap: int = 30

    # Average glyph advance as a fraction of font size. Approximation only:
    # CJK glyphs are closer to 1.0, so wide-script titles drift right.
    char_width_factor: float = 0.6

    default_content: str = "示例页面"
    default_bg_color: str = "#4F46E5"
    default_text_color: str = "#FFFFFF"
    default_icon_size: str = "100"
    default_text_size: str = "72"
    default_font: str = "'PingFang SC', 'Microsoft YaHei', sans-serif"
    font_weight: str = "bold"

    @property
    def content_x(self) -> float:
        return (self.canvas_width - self.content_width) / 2

    @property
    def content_y(self) -> float:
        return (self.canvas_height - self.content_height) / 2
