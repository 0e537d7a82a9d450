# budgetbot/services/sinks/csv_sink.py
# Записи в CSV: одна строка на сообщение, шапка пишется в пустой файл.

from __future__ import annotations

import csv
import logging
from pathlib import Path

from budgetbot.services.events import BudgetRecord, EventHandler, EventKind, HandlerEvent

log = logging.getLogger(__name__)

FIELDS = ["id", "date", "category", "amount", "description", "user"]


def _row(r: BudgetRecord) -> dict[str, str]:
    return {
        "id": str(r.id),
        "date": r.date.isoformat(),
        "category": r.category,
        "amount": str(r.amount),
        "description": r.description,
        "user": r.user,
    }


class CsvEventHandler(EventHandler):
    name = "csv"

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _is_empty(self) -> bool:
        return not self.path.exists() or self.path.stat().st_size == 0

    def _append(self, record: BudgetRecord) -> None:
        write_header = self._is_empty()
        with self.path.open("a", newline="", encoding="utf-8") as fh:
            w = csv.DictWriter(fh, fieldnames=FIELDS)
            if write_header:
                w.writeheader()
            w.writerow(_row(record))

    def _replace(self, record: BudgetRecord) -> bool:
        if self._is_empty():
            return False
        with self.path.open(newline="", encoding="utf-8") as fh:
            rows = list(csv.DictReader(fh))
        key = (str(record.id), record.user)
        found = False
        for i, row in enumerate(rows):
            if (row.get("id"), row.get("user")) == key:
                rows[i] = _row(record)
                found = True
        if not found:
            return False
        with self.path.open("w", newline="", encoding="utf-8") as fh:
            w = csv.DictWriter(fh, fieldnames=FIELDS)
            w.writeheader()
            w.writerows(rows)
        return True

    async def handle_event(self, event: HandlerEvent) -> None:
        if event.kind is EventKind.UPDATE and self._replace(event.record):
            log.info('record_updated sink="csv" id=%s', event.record.id)
            return
        self._append(event.record)
        log.info('record_added sink="csv" id=%s', event.record.id)
