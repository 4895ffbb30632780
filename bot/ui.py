from __future__ import annotations

from typing import Any, Dict, List

from telegram import InlineKeyboardButton, InlineKeyboardMarkup

from .media_utils import partition_media, variant_label


def build_download_keyboard(result: Dict[str, Any]) -> InlineKeyboardMarkup | None:
    buttons: List[List[InlineKeyboardButton]] = []
    # URL buttons only: the bot relays links and never fetches media itself
    _, others = partition_media(result)
    for m in others:
        buttons.append([InlineKeyboardButton(text=f"⬇️ {variant_label(m.get('type'))}", url=m["url"])])

    music = result.get("music_info") or {}
    music_url = music.get("url")
    if isinstance(music_url, str) and music_url.startswith("http"):
        buttons.append([InlineKeyboardButton(text="🎵 Download Audio", url=music_url)])

    return InlineKeyboardMarkup(buttons) if buttons else None
