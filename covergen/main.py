"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from covergen import __version__
from covergen.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.covergen_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="covergen",
        description="Notion-style SVG cover images from query parameters",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from covergen.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
