# budgetbot/handlers/records.py
# Свободный текст -> запись. Новое сообщение = добавление, правка = обновление.

from __future__ import annotations

import logging

from aiogram import F, Router
from aiogram.types import Message

from budgetbot.services.events import EventHandler
from budgetbot.services.parser.interpreter import Input, MessageInterpreter

log = logging.getLogger(__name__)
router = Router(name=__name__)

NOT_SAVED = "⚠️ Could not save the record, try again later."


def _user_name(m: Message) -> str:
    u = m.from_user
    if u is None:
        return ""
    return u.username or u.full_name or str(u.id)


async def process_text(m: Message, interpreter: MessageInterpreter, sink: EventHandler, *, edited: bool) -> None:
    log.info('message id=%s from="%s" text="%s"', m.message_id, _user_name(m), m.text)
    output = interpreter.handle_message(Input(
        id=m.message_id,
        user=_user_name(m),
        text=m.text or "",
        is_new=not edited,
    ))
    if output is None:
        return

    try:
        for event in output.events:
            await sink.handle_event(event)
    except Exception:
        log.exception('sink_failed sink="%s" id=%s', sink.name, m.message_id)
        await m.reply(NOT_SAVED)
        return

    log.info("reply id=%s text=%r", m.message_id, output.text)
    await m.reply(output.text)


@router.message(F.text & ~F.text.startswith("/"))
async def free_text(m: Message, interpreter: MessageInterpreter, sink: EventHandler) -> None:
    await process_text(m, interpreter, sink, edited=False)


@router.edited_message(F.text & ~F.text.startswith("/"))
async def edited_text(m: Message, interpreter: MessageInterpreter, sink: EventHandler) -> None:
    await process_text(m, interpreter, sink, edited=True)
