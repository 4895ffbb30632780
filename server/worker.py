"""Edge-worker flavour of the download endpoint.

One ``fetch`` handler answers every method on the route, the way a serverless
fetch handler does, and stamps permissive CORS headers on each response so a
browser page on another origin can call it directly.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import web

from tikdl.config import Settings
from tikdl.service import UpstreamClient, handle_download, render_envelope
from tikdl.tikwm_client import TikwmClient

logger = logging.getLogger("server")

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

CLIENT_KEY = web.AppKey("upstream_client", object)
SESSION_KEY = web.AppKey("http_session", aiohttp.ClientSession)


def _json_response(status: int, envelope: Dict[str, Any]) -> web.Response:
    return web.Response(
        body=render_envelope(envelope),
        status=status,
        content_type="application/json",
        headers=CORS_HEADERS,
    )


async def _url_from_request(request: web.Request) -> Optional[str]:
    if request.method == "POST":
        try:
            body = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            return None
        return body.get("url") if isinstance(body, dict) else None
    if request.method == "GET":
        return request.query.get("url")
    return None


async def fetch(request: web.Request) -> web.Response:
    if request.method == "OPTIONS":
        return web.Response(status=200, headers=CORS_HEADERS)

    url = await _url_from_request(request)
    status, envelope = await handle_download(
        url,
        client=request.app[CLIENT_KEY],
        session=request.app[SESSION_KEY],
    )
    return _json_response(status, envelope)


async def _http_session_ctx(app: web.Application):
    app[SESSION_KEY] = aiohttp.ClientSession()
    yield
    await app[SESSION_KEY].close()


def create_app(settings: Optional[Settings] = None, client: Optional[UpstreamClient] = None) -> web.Application:
    settings = settings or Settings()
    app = web.Application()
    app[CLIENT_KEY] = client or TikwmClient(settings.tikwm_api_url)
    app.cleanup_ctx.append(_http_session_ctx)
    app.router.add_route("*", "/", fetch)
    app.router.add_route("*", "/api/download", fetch)
    logger.info("worker_app_created upstream=%s", getattr(app[CLIENT_KEY], "api_url", type(app[CLIENT_KEY]).__name__))
    return app
