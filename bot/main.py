from __future__ import annotations

import asyncio
import logging
import time
from urllib.parse import urlparse

from dotenv import load_dotenv

from tikdl.config import load_settings
from .api_client import ApiClient
from .app import build_app
from .context import BotContext


load_dotenv()
settings = load_settings()

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s :: %(message)s")
logger = logging.getLogger("bot")


async def main_async():
    if not settings.telegram_bot_token:
        raise RuntimeError("TELEGRAM_BOT_TOKEN belum diset.")

    ctx = BotContext(
        settings=settings,
        api=ApiClient(
            settings.downloader_api_base_url,
            connect_timeout=settings.http_connect_timeout,
            read_timeout=settings.http_read_timeout,
            total_timeout=settings.http_total_timeout,
        ),
        started_at=time.time(),
    )
    app = build_app(ctx)
    logger.info("================ TikTok Downloader Bot ================")
    logger.info("API endpoint: %s", urlparse(settings.downloader_api_base_url).netloc or settings.downloader_api_base_url)
    logger.info("=======================================================")
    logger.info("Bot starting... kirim /start ke bot Telegram Anda.")
    await app.initialize()
    await app.start()
    await app.updater.start_polling(drop_pending_updates=True)
    try:
        await asyncio.Future()
    finally:
        await app.updater.stop()
        await app.stop()
        await app.shutdown()


def main() -> None:
    asyncio.run(main_async())


if __name__ == "__main__":
    main()
