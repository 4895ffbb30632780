from __future__ import annotations

from typing import Any, Dict

import aiohttp

from .config import TIKWM_API_URL


class TikwmError(Exception):
    pass


class UpstreamDataError(TikwmError):
    def __init__(self, message: str = "No data received from TikTok API"):
        super().__init__(message)


# Fixed header set the extraction endpoint expects from its own web page.
DEFAULT_HEADERS = {
    "Accept": "application/json, text/javascript, */*; q=0.01",
    "Accept-Language": "id-ID,id;q=0.9,en-US;q=0.8,en;q=0.7",
    "Content-Type": "application/x-www-form-urlencoded; charset=UTF-8",
    "Origin": "https://www.tikwm.com",
    "Referer": "https://www.tikwm.com/",
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    ),
}


class TikwmClient:
    def __init__(self, api_url: str = TIKWM_API_URL) -> None:
        self.api_url = api_url
        self.headers = dict(DEFAULT_HEADERS)

    def build_form(self, url: str) -> Dict[str, str]:
        return {"url": url, "hd": "1"}

    async def fetch(self, session: aiohttp.ClientSession, url: str) -> Dict[str, Any]:
        """POST the source URL once and return the body's ``data`` payload.

        Transport failures (connection errors, a body that is not JSON) are not
        caught here; the request handler maps them to a server error.
        """
        async with session.post(self.api_url, data=self.build_form(url), headers=self.headers) as resp:
            body = await resp.json(content_type=None)

        data = body.get("data") if isinstance(body, dict) else None
        # {} and [] still count as a payload
        if data is None or data is False or data == "" or data == 0:
            raise UpstreamDataError()
        return data
