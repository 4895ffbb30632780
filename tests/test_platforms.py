from __future__ import annotations

import pytest

from tikdl.platforms import detect_platform, is_supported_url, is_tiktok_url


@pytest.mark.parametrize(
    "url",
    [
        "https://vm.tiktok.com/ZMshortcode/",
        "https://vt.tiktok.com/ZSabc123/",
        "https://www.tiktok.com/@user/video/7312345678901234567",
        "tiktok.com/@user/video/1",
        "http://m.tiktok.com/v/1.html",
    ],
)
def test_tiktok_urls_match(url: str) -> None:
    assert is_tiktok_url(url)
    assert detect_platform(url) == "tiktok"


@pytest.mark.parametrize("url", ["https://example.com/video", "https://notthesite.com", "", "https://youtu.be/x"])
def test_other_urls_rejected(url: str) -> None:
    assert not is_tiktok_url(url)
    assert not is_supported_url(url)


def test_non_string_is_rejected() -> None:
    assert not is_tiktok_url(None)  # type: ignore[arg-type]
