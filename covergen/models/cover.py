"""Cover request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from covergen.engine.config import CoverLayout

_LAYOUT = CoverLayout()


class BackgroundRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    keyword: str | None = Field(default=None, description="Photo search keyword (bg)")
    service: str | None = Field(default=None, description="picsum, pixabay or pexels (bgservice)")
    photo_id: str | None = Field(default=None, description="Fixed Picsum photo id (bgid)")

    @property
    def requested(self) -> bool:
        return bool(self.keyword or self.photo_id)


class CoverRequest(BaseModel):
    """Normalized cover parameters. Empty strings count as absent."""

    model_config = ConfigDict(frozen=True)

    icon_prefix: str | None = None
    icon_name: str | None = None
    content: str = _LAYOUT.default_content
    bg_color: str = _LAYOUT.default_bg_color
    text_color: str = _LAYOUT.default_text_color
    icon_color: str | None = None
    icon_size: str = _LAYOUT.default_icon_size
    background: BackgroundRequest = Field(default_factory=BackgroundRequest)
    pattern: str | None = None
    font: str = _LAYOUT.default_font
    text_size: str = _LAYOUT.default_text_size

    @field_validator("icon_prefix", "icon_name", "icon_color", "pattern", mode="before")
    @classmethod
    def _blank_is_none(cls, value: str | None) -> str | None:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("content", mode="before")
    @classmethod
    def _empty_content_is_default(cls, value: str | None) -> str:
        # Whitespace-only titles are kept as typed; only a missing one defaults.
        if value is None or value == "":
            return _LAYOUT.default_content
        return value

    @field_validator(
        "bg_color", "text_color", "icon_size", "font", "text_size", mode="before"
    )
    @classmethod
    def _blank_is_default(cls, value: str | None, info) -> str:
        if value is None or (isinstance(value, str) and not value.strip()):
            return cls.model_fields[info.field_name].default
        return value

    @classmethod
    def from_query(cls, params: dict[str, str]) -> "CoverRequest":
        """Build from the public query-string parameter names."""

        def opt(name: str) -> str | None:
            value = params.get(name)
            return value if value else None

        return cls(
            icon_prefix=opt("iconprefix"),
            icon_name=opt("iconname"),
            content=opt("content"),
            bg_color=opt("bgcolor"),
            text_color=opt("textcolor"),
            icon_color=opt("iconcolor"),
            icon_size=opt("iconsize"),
            background=BackgroundRequest(
                keyword=opt("bg"),
                service=opt("bgservice"),
                photo_id=opt("bgid"),
            ),
            pattern=opt("pattern"),
            font=opt("font"),
            text_size=opt("text_size"),
        )
