from __future__ import annotations

import asyncio
from typing import Any, Dict

import aiohttp
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential


class ApiError(Exception):
    def __init__(self, message: str, status: int | None = None):
        super().__init__(message)
        self.status = status


class ApiClient:
    """Calls the download endpoint and unwraps its success/error envelope."""

    def __init__(
        self,
        base_url: str,
        connect_timeout: int = 10,
        read_timeout: int = 60,
        total_timeout: int = 120,
    ) -> None:
        self.base_url = base_url
        self._timeout = aiohttp.ClientTimeout(
            total=total_timeout, connect=connect_timeout, sock_read=read_timeout
        )

    # Only transport failures are retried; an error envelope is a final answer.
    @retry(
        retry=retry_if_exception_type((aiohttp.ClientConnectionError, asyncio.TimeoutError)),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=4),
        stop=stop_after_attempt(3),
        reraise=True,
    )
    async def fetch(self, session: aiohttp.ClientSession, url: str) -> Dict[str, Any]:
        async with session.post(self.base_url, json={"url": url}, timeout=self._timeout) as resp:
            try:
                envelope = await resp.json(content_type=None)
            except ValueError:
                text = await resp.text()
                raise ApiError(f"Status {resp.status}: {text[:200]}", resp.status)
            status = resp.status

        if not isinstance(envelope, dict):
            raise ApiError("Invalid response from downloader API", status)
        if not envelope.get("success"):
            raise ApiError(envelope.get("error") or f"Status {status}", status)
        data = envelope.get("data")
        if not isinstance(data, dict):
            raise ApiError("Invalid response: missing data", status)
        return data
