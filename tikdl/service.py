from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Protocol, Tuple

import aiohttp

from .normalizer import normalize
from .platforms import is_tiktok_url

logger = logging.getLogger("tikdl")

URL_REQUIRED = "URL is required"
INVALID_URL = "Invalid TikTok URL"
INTERNAL_ERROR = "Internal server error"


class ValidationError(Exception):
    status = 400


class UpstreamClient(Protocol):
    async def fetch(self, session: aiohttp.ClientSession, url: str) -> Dict[str, Any]: ...


def validate_url(url: Any) -> str:
    if not isinstance(url, str) or not url.strip():
        raise ValidationError(URL_REQUIRED)
    if not is_tiktok_url(url):
        raise ValidationError(INVALID_URL)
    return url


def success_envelope(data: Dict[str, Any]) -> Dict[str, Any]:
    return {"success": True, "data": data}


def error_envelope(message: str) -> Dict[str, Any]:
    return {"success": False, "error": message}


def render_envelope(envelope: Dict[str, Any]) -> bytes:
    # Both adapters serialize through here so their bodies match byte for byte.
    return json.dumps(envelope, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


async def handle_download(
    url: Optional[str],
    *,
    client: UpstreamClient,
    session: Optional[aiohttp.ClientSession],
) -> Tuple[int, Dict[str, Any]]:
    """Validate, fetch, normalize. Returns (http_status, envelope).

    Every failure is converted into an error envelope here; nothing is retried.
    """
    try:
        source = validate_url(url)
    except ValidationError as e:
        logger.info("download_rejected url=%r error=%s", url, e)
        return e.status, error_envelope(str(e))

    logger.info("download_request url=%s", source)
    try:
        raw = await client.fetch(session, source)
        result = normalize(raw)
    except Exception as e:
        logger.exception("download_failed url=%s", source)
        return 500, error_envelope(str(e) or INTERNAL_ERROR)

    logger.info("download_success url=%s id=%s medias=%s", source, result.get("id"), len(result["data"]))
    return 200, success_envelope(result)
