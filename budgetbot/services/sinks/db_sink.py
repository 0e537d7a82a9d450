# budgetbot/services/sinks/db_sink.py
from __future__ import annotations

import logging

from budgetbot.core.db import session_scope
from budgetbot.repo.records import add_record, update_record
from budgetbot.services.events import EventHandler, EventKind, HandlerEvent

log = logging.getLogger(__name__)


class DbEventHandler(EventHandler):
    name = "db"

    async def handle_event(self, event: HandlerEvent) -> None:
        r = event.record
        async with session_scope() as s:
            if event.kind is EventKind.UPDATE:
                row = await update_record(s, r)
                if row is not None:
                    log.info('record_updated sink="db" id=%s', r.id)
                    return
                # правка сообщения, у которого раньше не было суммы
                log.info('record_missing_on_update sink="db" id=%s', r.id)
            await add_record(s, r)
        log.info('record_added sink="db" id=%s', r.id)
