from __future__ import annotations

import re


# Apex domain plus the two short-link hosts TikTok hands out in share sheets.
SUPPORTED_PLATFORMS = {
    "tiktok": [
        "tiktok.com",
        "vm.tiktok.com",
        "vt.tiktok.com",
    ],
}

_TIKTOK_RE = re.compile(
    r"(?:https?://)?(?:www\.)?(?:"
    + "|".join(re.escape(d) for d in sorted(SUPPORTED_PLATFORMS["tiktok"], key=len, reverse=True))
    + r")"
)


def is_tiktok_url(url: str) -> bool:
    if not isinstance(url, str):
        return False
    return _TIKTOK_RE.search(url) is not None


def detect_platform(url: str) -> str | None:
    if is_tiktok_url(url):
        return "tiktok"
    return None


def is_supported_url(url: str) -> bool:
    return detect_platform(url) is not None


def sample_urls_text() -> str:
    return (
        "Contoh URL yang didukung:\n"
        "- https://www.tiktok.com/@user/video/123\n"
        "- https://vm.tiktok.com/ZMshortcode/\n"
        "- https://vt.tiktok.com/ZSshortcode/\n"
    )
