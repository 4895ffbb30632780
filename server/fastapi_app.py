from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Optional

import aiohttp
from fastapi import FastAPI, Request, Response

from tikdl.config import Settings
from tikdl.service import UpstreamClient, handle_download, render_envelope
from tikdl.tikwm_client import TikwmClient

logger = logging.getLogger("server")


def health_check() -> dict[str, str]:
    return {"status": "ok"}


def _envelope_response(status: int, envelope: dict[str, Any]) -> Response:
    return Response(content=render_envelope(envelope), status_code=status, media_type="application/json")


async def _url_from_body(request: Request) -> Optional[str]:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None
    if not isinstance(body, dict):
        return None
    return body.get("url")


def create_app(settings: Optional[Settings] = None, client: Optional[UpstreamClient] = None) -> FastAPI:
    settings = settings or Settings()
    upstream = client or TikwmClient(settings.tikwm_api_url)

    @asynccontextmanager
    async def app_lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.http_session = aiohttp.ClientSession()
        try:
            yield
        finally:
            await app.state.http_session.close()

    app = FastAPI(title="TikTok Downloader API", version="0.1.0", lifespan=app_lifespan)

    async def download_post(request: Request) -> Response:
        url = await _url_from_body(request)
        status, envelope = await handle_download(url, client=upstream, session=request.app.state.http_session)
        return _envelope_response(status, envelope)

    async def download_get(request: Request) -> Response:
        url = request.query_params.get("url")
        status, envelope = await handle_download(url, client=upstream, session=request.app.state.http_session)
        return _envelope_response(status, envelope)

    app.add_api_route("/api/download", download_post, methods=["POST"], tags=["download"])
    app.add_api_route("/api/download", download_get, methods=["GET"], tags=["download"])
    app.add_api_route("/health", health_check, methods=["GET"], tags=["system"], operation_id="health_check")
    logger.info("fastapi_app_created upstream=%s", getattr(upstream, "api_url", type(upstream).__name__))
    return app
