"""GET /: render a cover image from query parameters."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from covergen.dependencies import get_background_resolver, get_icon_resolver
from covergen.engine.composer import CoverComposer
from covergen.models.cover import CoverRequest
from covergen.resolvers.backgrounds import BackgroundResolver
from covergen.resolvers.icons import IconResolver

logger = logging.getLogger(__name__)

router = APIRouter()

SVG_MEDIA_TYPE = "image/svg+xml"
FAILURE_MESSAGE = "Failed to generate cover image"


@router.get("/", response_class=Response)
async def cover(
    request: Request,
    icons: IconResolver = Depends(get_icon_resolver),
    backgrounds: BackgroundResolver = Depends(get_background_resolver),
) -> Response:
    """Query parameters: iconprefix, iconname, content, bgcolor, textcolor,
    iconcolor, iconsize, bg, bgservice, bgid, pattern, font, text_size.
    """
    try:
        req = CoverRequest.from_query(dict(request.query_params))
        svg = await CoverComposer(icons, backgrounds).compose(req)
    except Exception:
        logger.exception("Cover generation failed for %s", request.url.query)
        return PlainTextResponse(FAILURE_MESSAGE, status_code=500)

    return Response(content=svg, media_type=SVG_MEDIA_TYPE)
