# budgetbot/handlers/start.py
# Онбординг (/start) и справка (/help)

from __future__ import annotations

from aiogram import Router
from aiogram.filters import Command, CommandStart
from aiogram.types import Message

router = Router(name=__name__)

HELP_TEXT = {
    "en": (
        "Send a purchase as plain text, the first number is the amount:\n"
        "• <code>Chocolate pie 9,75</code>\n"
        "• <code>taxi 12 yesterday</code>\n"
        "• <code>banana 4.5 last Monday</code>\n"
        "• <code>lunch 15 3 days ago</code>\n\n"
        "Edit the message to fix the record."
    ),
    "ru": (
        "Пиши покупку простым текстом, первое число — сумма:\n"
        "• <code>шоколадный торт 9,75</code>\n"
        "• <code>такси 12 вчера</code>\n"
        "• <code>бананы 4.5 в прошлый понедельник</code>\n"
        "• <code>обед 15 3 дня назад</code>\n\n"
        "Исправить запись — отредактируй сообщение."
    ),
}


@router.message(CommandStart())
async def cmd_start(m: Message, language: str = "en") -> None:
    greeting = "👋 Привет! Я записываю траты.\n\n" if language == "ru" else "👋 Hi! I keep track of your spending.\n\n"
    await m.answer(greeting + HELP_TEXT.get(language, HELP_TEXT["en"]), parse_mode="HTML")


@router.message(Command("help"))
async def cmd_help(m: Message, language: str = "en") -> None:
    await m.answer(HELP_TEXT.get(language, HELP_TEXT["en"]), parse_mode="HTML")
