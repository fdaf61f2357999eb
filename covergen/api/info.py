"""GET /info: static configuration and preview page."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter()

_INFO_PAGE = Path(__file__).resolve().parent.parent / "static" / "info.html"


@lru_cache(maxsize=1)
def _load_page() -> str:
    return _INFO_PAGE.read_text(encoding="utf-8")


@router.get("/info", response_class=HTMLResponse)
async def info() -> HTMLResponse:
    return HTMLResponse(_load_page())
