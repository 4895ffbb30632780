from __future__ import annotations

from typing import Any, Dict

import pytest


@pytest.fixture
def video_payload() -> Dict[str, Any]:
    return {
        "id": "7312345678901234567",
        "region": "ID",
        "title": "sunset timelapse #fyp",
        "cover": "https://p16.example/cover.jpg",
        "duration": 15,
        "create_time": 1704207845,
        "size": 2048000,
        "wm_size": 2150000,
        "hd_size": 4096000,
        "wmplay": "https://v.example/wm.mp4",
        "play": "https://v.example/nowm.mp4",
        "hdplay": "https://v.example/hd.mp4",
        "music": "https://a.example/music.mp3",
        "music_info": {
            "id": "7300000000000000001",
            "title": "original sound",
            "play": "https://a.example/fallback.mp3",
            "author": "creator",
            "album": "",
        },
        "play_count": 12345,
        "digg_count": 1234567,
        "comment_count": 89,
        "share_count": 1000,
        "download_count": 0,
        "author": {
            "id": "6800000000000000000",
            "unique_id": "creator.handle",
            "nickname": "Creator",
            "avatar": "https://p16.example/avatar.jpg",
        },
    }


@pytest.fixture
def photo_payload() -> Dict[str, Any]:
    return {
        "id": "7398765432109876543",
        "title": "slideshow",
        "duration": 0,
        "create_time": 1704207845,
        "size": 0,
        "wm_size": 0,
        "hd_size": 0,
        "play": "https://a.example/slideshow-audio.mp3",
        "images": [
            "https://p16.example/1.jpg",
            "https://p16.example/2.jpg",
            "https://p16.example/3.jpg",
        ],
    }
