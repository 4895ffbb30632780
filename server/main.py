from __future__ import annotations

import logging

import uvicorn
from aiohttp import web
from dotenv import load_dotenv

from tikdl.config import load_settings
from . import fastapi_app, worker

logger = logging.getLogger("server")


def main() -> None:
    load_dotenv()
    settings = load_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s :: %(message)s")

    logger.info("================ TikTok Downloader API ================")
    logger.info("Variant: %s", settings.server_variant)
    logger.info("Upstream: %s", settings.tikwm_api_url)
    logger.info("Listening on %s:%s", settings.server_host, settings.server_port)
    logger.info("=======================================================")

    if settings.server_variant == "worker":
        web.run_app(worker.create_app(settings), host=settings.server_host, port=settings.server_port, print=None)
    else:
        uvicorn.run(
            fastapi_app.create_app(settings),
            host=settings.server_host,
            port=settings.server_port,
            log_level=settings.log_level.lower(),
        )


if __name__ == "__main__":
    main()
