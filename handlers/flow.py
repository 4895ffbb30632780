from __future__ import annotations

import logging
from typing import Any, Dict, List

from telegram import InputMediaPhoto

from bot.media_utils import build_caption, partition_media
from bot.ui import build_download_keyboard

ALBUM_SIZE = 10


def chunk_photos(photos: List[Dict[str, Any]], size: int = ALBUM_SIZE) -> List[List[Dict[str, Any]]]:
    return [photos[i : i + size] for i in range(0, len(photos), size)]


async def send_result_flow(message, *, result: Dict[str, Any], req_id: str, user_id: int, original_url: str) -> None:
    logger = logging.getLogger("bot")

    photos, others = partition_media(result)
    if not photos and not others:
        await message.reply_text("Tidak ditemukan media.")
        return

    logger.info(
        "request_success id=%s user=%s url=%s photos=%s videos=%s",
        req_id,
        user_id,
        original_url,
        len(photos),
        len(others),
    )

    caption_text = build_caption(result)
    kb = build_download_keyboard(result)

    # Photo posts: albums of 2-10, caption on the first item only. A lone
    # photo (or a trailing group of one) cannot be an album.
    for g_idx, group in enumerate(chunk_photos(photos)):
        caption = f"🖼️ {caption_text}" if g_idx == 0 else None
        try:
            if len(group) == 1:
                await message.reply_photo(photo=group[0]["url"], caption=caption)
                continue
            media_group = [
                InputMediaPhoto(media=m["url"], caption=caption if idx == 0 else None)
                for idx, m in enumerate(group)
            ]
            await message.reply_media_group(media=media_group)
        except Exception:
            logger.exception("send_image_group_failed id=%s group=%s", req_id, g_idx)

    if kb:
        await message.reply_text(caption_text, reply_markup=kb)
    elif not photos:
        await message.reply_text(caption_text)
