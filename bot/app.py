from __future__ import annotations

from telegram.ext import Application, ApplicationBuilder

from .context import BotContext
from handlers import register_handlers


def build_app(ctx: BotContext) -> Application:
    app = ApplicationBuilder().token(ctx.settings.telegram_bot_token).build()
    register_handlers(app, ctx)
    return app
