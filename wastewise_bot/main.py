from __future__ import annotations

import asyncio

from .adapters.http import HTTPKeyValueStore
from .bot import WastewiseBot
from .commands.register import register_commands
from .config import Settings, load_settings
from .core.storage import JSONFileStore, KeyValueStore
from .data.dashboard import Dashboard
from .logging_config import setup_logging


def build_storage(settings: Settings) -> KeyValueStore:
    if settings.store_url:
        return HTTPKeyValueStore(settings.store_url, token=settings.store_token or None)
    return JSONFileStore(settings.data_path)


def main() -> int:
    log = setup_logging()
    settings = load_settings()
    if not settings.token:
        log.error(
            "DISCORD_BOT_TOKEN is not set. "
            "Export it in your environment before running."
        )
        return 2
    storage = build_storage(settings)
    dashboard = Dashboard(storage, default_community=settings.default_community)
    bot = WastewiseBot()
    register_commands(bot, dashboard)

    async def runner():
        try:
            async with bot:
                await bot.start(settings.token)
        except KeyboardInterrupt:
            log.info("Shutting down...")
        finally:
            if isinstance(storage, HTTPKeyValueStore):
                storage.close()
        return 0

    return asyncio.run(runner())


if __name__ == "__main__":
    raise SystemExit(main())
