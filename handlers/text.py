from __future__ import annotations

import logging
import uuid

import aiohttp
from telegram.ext import ContextTypes, MessageHandler, filters

from bot.api_client import ApiError
from bot.context import BotContext
from tikdl.platforms import detect_platform, sample_urls_text
from .flow import send_result_flow


def text_handler(ctx: BotContext) -> MessageHandler:
    async def _handle(update, context: ContextTypes.DEFAULT_TYPE):
        message = update.message
        if not message or not message.text:
            return

        text = message.text.strip()
        if not text:
            return
        if not detect_platform(text):
            await message.reply_text("URL tidak valid atau tidak didukung.\n" + sample_urls_text())
            return

        logger = logging.getLogger("bot")
        req_id = uuid.uuid4().hex[:12]
        user_id = message.from_user.id if message.from_user else 0
        processing_msg = await message.reply_text("Sedang memproses link TikTok kamu...")
        try:
            try:
                async with aiohttp.ClientSession() as session:
                    result = await ctx.api.fetch(session, text)
            except ApiError as e:
                logger.warning("downloader_error id=%s user=%s url=%s status=%s error=%s", req_id, user_id, text, e.status, str(e))
                await message.reply_text(f"Gagal: {e}")
                return
            except Exception:
                logger.exception("unexpected_downloader_error id=%s user=%s url=%s", req_id, user_id, text)
                await message.reply_text("Maaf, server downloader sedang sibuk. Coba lagi nanti.")
                return

            await send_result_flow(message, result=result, req_id=req_id, user_id=user_id, original_url=text)
        finally:
            try:
                await processing_msg.delete()
            except Exception:
                logger.debug("processing_message_delete_failed id=%s", req_id)

    return MessageHandler(filters.TEXT & ~filters.COMMAND, _handle)
