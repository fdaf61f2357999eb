"""Run the cover service: ``python -m covergen``."""

from __future__ import annotations

import logging

import uvicorn

from covergen.config import settings

logger = logging.getLogger(__name__)


def main() -> None:
    from covergen.main import app

    logger.info("Cover generator listening on http://%s:%d/", settings.host, settings.port)
    logger.info("Preview page: http://%s:%d/info", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
