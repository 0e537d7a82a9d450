# budgetbot/services/sinks/__init__.py
from __future__ import annotations

from datetime import date
from typing import Callable

from budgetbot.core.config import Settings
from budgetbot.services.events import EventHandler


def build_sink(settings: Settings, today: Callable[[], date] = date.today) -> EventHandler:
    if settings.event_sink == "db":
        from .db_sink import DbEventHandler
        return DbEventHandler()
    if settings.event_sink == "xlsx":
        from .xlsx_sink import XlsxEventHandler
        return XlsxEventHandler(settings.records_xlsx, settings.xlsx_sheet_format, today=today)
    from .csv_sink import CsvEventHandler
    return CsvEventHandler(settings.records_csv)
