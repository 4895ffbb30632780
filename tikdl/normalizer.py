from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping

MEDIA_PHOTO = "photo"
MEDIA_WATERMARK = "watermark"
MEDIA_NOWATERMARK = "nowatermark"
MEDIA_NOWATERMARK_HD = "nowatermark_hd"

# Emission order for video posts.
VIDEO_VARIANTS = (
    ("wmplay", MEDIA_WATERMARK),
    ("play", MEDIA_NOWATERMARK),
    ("hdplay", MEDIA_NOWATERMARK_HD),
)

UNKNOWN_DATE = "Unknown"


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        pass
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return 0


def _section(raw: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = raw.get(key)
    return value if isinstance(value, Mapping) else {}


def format_number(value: Any) -> str:
    """Group thousands with "." whatever the host locale is: 12345 -> "12.345"."""
    return f"{_to_int(value):,}".replace(",", ".")


def format_date(timestamp: Any) -> str:
    ts = _to_int(timestamp)
    if ts <= 0:
        return UNKNOWN_DATE
    try:
        dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return UNKNOWN_DATE
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt:%A}, {dt:%B} {dt.day}, {dt.year} at {hour}:{dt:%M}:{dt:%S} {meridiem}"


def is_photo_post(raw: Mapping[str, Any]) -> bool:
    # Upstream leaves every size field empty for slideshows. This is a
    # heuristic over an undocumented schema.
    images = raw.get("images")
    if raw.get("size") or raw.get("wm_size") or raw.get("hd_size"):
        return False
    return isinstance(images, list) and len(images) > 0


def build_media(raw: Mapping[str, Any]) -> List[Dict[str, str]]:
    medias: List[Dict[str, str]] = []
    if is_photo_post(raw):
        for image_url in raw["images"]:
            if isinstance(image_url, str) and image_url:
                medias.append({"type": MEDIA_PHOTO, "url": image_url})
        return medias

    for key, media_type in VIDEO_VARIANTS:
        url = raw.get(key)
        if isinstance(url, str) and url:
            medias.append({"type": media_type, "url": url})
    return medias


def _music_info(raw: Mapping[str, Any]) -> Dict[str, Any]:
    music = _section(raw, "music_info")
    return {
        "id": music.get("id") or "",
        "title": music.get("title") or "",
        "author": music.get("author") or "",
        "album": music.get("album") or None,
        "url": raw.get("music") or music.get("play") or "",
    }


def _stats(raw: Mapping[str, Any]) -> Dict[str, str]:
    return {
        "views": format_number(raw.get("play_count")),
        "likes": format_number(raw.get("digg_count")),
        "comment": format_number(raw.get("comment_count")),
        "share": format_number(raw.get("share_count")),
        "download": format_number(raw.get("download_count")),
    }


def _author(raw: Mapping[str, Any]) -> Dict[str, Any]:
    author = _section(raw, "author")
    return {
        "id": author.get("id") or "",
        "fullname": author.get("unique_id") or "",
        "nickname": author.get("nickname") or "",
        "avatar": author.get("avatar") or "",
    }


def normalize(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Reshape one upstream ``data`` payload into the display contract.

    Never raises on missing optional fields: sub-objects fall back to empty
    strings (``album`` to None) and counts to "0". A post with neither images
    nor play URLs yields an empty ``data`` list.
    """
    if not isinstance(raw, Mapping):
        raw = {}

    duration = raw.get("duration")
    return {
        "status": True,
        "title": raw.get("title"),
        "taken_at": format_date(raw.get("create_time")),
        "region": raw.get("region"),
        "id": raw.get("id"),
        "durations": duration,
        "duration": f"{_to_int(duration)} Seconds",
        "cover": raw.get("cover"),
        "size_wm": raw.get("wm_size"),
        "size_nowm": raw.get("size"),
        "size_nowm_hd": raw.get("hd_size"),
        "data": build_media(raw),
        "music_info": _music_info(raw),
        "stats": _stats(raw),
        "author": _author(raw),
    }
