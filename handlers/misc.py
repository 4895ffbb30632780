from __future__ import annotations

import time
from typing import List

from telegram import Update
from telegram.ext import CallbackQueryHandler, CommandHandler, ContextTypes

from bot.context import BotContext


def _format_seconds(secs: float) -> str:
    s = int(secs)
    d, s = divmod(s, 86400)
    h, s = divmod(s, 3600)
    m, s = divmod(s, 60)
    parts: List[str] = []
    if d:
        parts.append(f"{d}d")
    if h or parts:
        parts.append(f"{h}h")
    if m or parts:
        parts.append(f"{m}m")
    parts.append(f"{s}s")
    return " ".join(parts)


async def _reply_target(update: Update):
    if update.callback_query:
        await update.callback_query.answer()
        return update.callback_query.message
    return update.effective_message


async def on_help(update: Update, context: ContextTypes.DEFAULT_TYPE):
    target = await _reply_target(update)
    if not target:
        return
    text = (
        "🤝 Bantuan\n"
        "- Kirim URL TikTok (tiktok.com, vm.tiktok.com, vt.tiktok.com)\n"
        "- Slideshow: bot mengirim album foto\n"
        "- Video: bot mengirim tombol unduh (watermark, tanpa watermark, HD)\n"
        "- Audio: tombol unduh musik jika tersedia\n"
    )
    await target.reply_text(text)


async def on_runtime(ctx: BotContext, update: Update, context: ContextTypes.DEFAULT_TYPE):
    target = await _reply_target(update)
    if not target:
        return
    uptime = _format_seconds(time.time() - ctx.started_at)
    s = ctx.settings
    text = (
        "🕒 Runtime Bot\n"
        f"- Uptime: {uptime}\n"
        f"- API: {s.downloader_api_base_url}\n"
        f"- Timeout: {s.http_total_timeout}s\n"
    )
    await target.reply_text(text)


def help_callback_handler() -> CallbackQueryHandler:
    return CallbackQueryHandler(on_help, pattern=r"^help$")


def runtime_callback_handler(ctx: BotContext) -> CallbackQueryHandler:
    return CallbackQueryHandler(lambda u, c: on_runtime(ctx, u, c), pattern=r"^runtime$")


def help_command_handler() -> CommandHandler:
    return CommandHandler("help", on_help)


def runtime_command_handler(ctx: BotContext) -> CommandHandler:
    return CommandHandler("runtime", lambda u, c: on_runtime(ctx, u, c))
