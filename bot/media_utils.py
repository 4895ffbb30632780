from __future__ import annotations

from typing import Any, Dict, List, Tuple

from tikdl.normalizer import MEDIA_NOWATERMARK, MEDIA_NOWATERMARK_HD, MEDIA_PHOTO, MEDIA_WATERMARK

VARIANT_LABELS = {
    MEDIA_WATERMARK: "Video (Watermark)",
    MEDIA_NOWATERMARK: "Video (Tanpa Watermark)",
    MEDIA_NOWATERMARK_HD: "Video HD (Tanpa Watermark)",
}


def partition_media(result: Dict[str, Any]) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    photos: List[Dict[str, Any]] = []
    others: List[Dict[str, Any]] = []
    for m in result.get("data") or []:
        if not isinstance(m, dict) or not m.get("url"):
            continue
        if m.get("type") == MEDIA_PHOTO:
            photos.append(m)
        else:
            others.append(m)
    return photos, others


def variant_label(media_type: str | None) -> str:
    return VARIANT_LABELS.get(media_type or "", "Video")


def pick_caption(author: str | None, title: str | None) -> str:
    a = author or "-"
    t = (title or "-").strip()
    if len(t) > 200:
        t = t[:197] + "..."
    return f'{a} - "{t}"'


def build_caption(result: Dict[str, Any]) -> str:
    author = result.get("author") or {}
    handle = author.get("fullname")
    who = author.get("nickname") or (f"@{handle}" if handle else None)
    stats = result.get("stats") or {}
    lines = [
        pick_caption(who, result.get("title")),
        f"🗓 {result.get('taken_at') or '-'} • ⏱ {result.get('duration') or '-'}",
        (
            f"👁 {stats.get('views', '0')}  ❤️ {stats.get('likes', '0')}  "
            f"💬 {stats.get('comment', '0')}  🔁 {stats.get('share', '0')}  "
            f"⬇️ {stats.get('download', '0')}"
        ),
    ]
    music = result.get("music_info") or {}
    if music.get("title"):
        lines.append(f"🎵 {music['title']} - {music.get('author') or '-'}")
    return "\n".join(lines)
