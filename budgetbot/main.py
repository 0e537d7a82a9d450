# budgetbot/main.py
from __future__ import annotations

import asyncio
import logging
import sys
from contextlib import suppress
from datetime import date, datetime
from typing import Callable
from zoneinfo import ZoneInfo

from budgetbot.core.config import Settings
from budgetbot.core.logging import setup_logging
from budgetbot.services.events import EventHandler
from budgetbot.services.parser.categorizer import Categorizer
from budgetbot.services.parser.dates import get_date_parser
from budgetbot.services.parser.interpreter import MessageInterpreter
from budgetbot.services.providers import CsvCategoryProvider, db_provider, default_provider
from budgetbot.services.sinks import build_sink


def make_today(tz: str) -> Callable[[], date]:
    zone = ZoneInfo(tz)

    def today() -> date:
        return datetime.now(zone).date()

    return today


async def load_categorizer(settings: Settings) -> Categorizer:
    if settings.categories_source == "db":
        provider = await db_provider()
    elif settings.categories_source == "default":
        provider = default_provider(settings.language)
    else:
        provider = CsvCategoryProvider(settings.categories_csv)
    return Categorizer.from_provider(provider)


async def _run_telegram(settings: Settings, interpreter: MessageInterpreter, sink: EventHandler) -> None:
    from aiogram import Bot, Dispatcher
    from aiogram.client.default import DefaultBotProperties
    from aiogram.enums import ParseMode
    from aiogram.types import BotCommand

    from budgetbot.handlers import setup as setup_handlers

    bot = Bot(
        token=settings.bot_token,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    # interpreter/sink/language попадают в хендлеры по имени аргумента
    dp = Dispatcher(interpreter=interpreter, sink=sink, language=settings.language)
    setup_handlers(dp)
    await bot.set_my_commands([
        BotCommand(command="start", description="Start"),
        BotCommand(command="help", description="How to write expenses"),
    ])

    logging.info("Bot starting polling…")
    try:
        await dp.start_polling(bot, allowed_updates=dp.resolve_used_update_types())
    finally:
        with suppress(Exception):
            await bot.session.close()
        logging.info("Bot stopped.")


async def main() -> None:
    settings = Settings.load()
    setup_logging(settings.log_level, stream=sys.stderr if settings.input == "cli" else sys.stdout)

    if settings.needs_database:
        from budgetbot.core.db import configure, init_db
        configure(settings.database_url)
        await init_db()

    today = make_today(settings.tz)
    categorizer = await load_categorizer(settings)
    interpreter = MessageInterpreter(categorizer, get_date_parser(settings.language), today=today)
    sink = build_sink(settings, today=today)
    logging.info('started input="%s" sink="%s" language="%s" categories=%s',
                 settings.input, sink.name, settings.language, len(categorizer.categories))

    try:
        if settings.input == "telegram":
            await _run_telegram(settings, interpreter, sink)
        else:
            from budgetbot.cli import ConsoleInputHandler
            await ConsoleInputHandler(interpreter, sink).start()
    finally:
        await sink.close()
        if settings.needs_database:
            from budgetbot.core.db import dispose
            await dispose()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
