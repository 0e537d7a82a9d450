# budgetbot/services/sinks/xlsx_sink.py
# Записи в XLSX: лист на месяц, шапка, фильтр, сортировка по дате.

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Callable

import openpyxl
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from budgetbot.services.events import BudgetRecord, EventHandler, EventKind, HandlerEvent

log = logging.getLogger(__name__)

HEADERS = ["Date", "Amount", "Category", "Description", "User", "Message Id"]
COL_DATE, COL_AMOUNT, COL_CATEGORY, COL_DESC, COL_USER, COL_MSG_ID = range(1, 7)
WIDTHS = {COL_DATE: 12, COL_AMOUNT: 12, COL_CATEGORY: 20, COL_DESC: 40, COL_USER: 16, COL_MSG_ID: 12}

MONEY_FORMAT = "#,##0.00"
DATE_FORMAT = "yyyy-mm-dd"


def _as_date(v) -> date:
    if isinstance(v, datetime):
        return v.date()
    if isinstance(v, date):
        return v
    return date.fromisoformat(str(v))


class XlsxEventHandler(EventHandler):
    name = "xlsx"

    def __init__(
        self,
        path: str | Path,
        sheet_format: str = "%Y-%m",
        today: Callable[[], date] = date.today,
    ) -> None:
        self.path = Path(path)
        self.sheet_format = sheet_format
        self._today = today

    def _open(self) -> openpyxl.Workbook:
        if self.path.exists():
            return openpyxl.load_workbook(self.path)
        wb = openpyxl.Workbook()
        wb.remove(wb.active)  # пустой "Sheet" не нужен
        return wb

    def _sheet(self, wb: openpyxl.Workbook, d: date) -> Worksheet:
        title = d.strftime(self.sheet_format)
        if title in wb.sheetnames:
            return wb[title]
        ws = wb.create_sheet(title=title)
        ws.append(HEADERS)
        for col in range(1, len(HEADERS) + 1):
            ws.cell(row=1, column=col).font = Font(bold=True)
            ws.column_dimensions[get_column_letter(col)].width = WIDTHS[col]
        ws.freeze_panes = "A2"
        log.debug('sheet_created title="%s"', title)
        return ws

    def _remove(self, wb: openpyxl.Workbook, record: BudgetRecord) -> bool:
        for ws in wb.worksheets:
            for row_idx in range(ws.max_row, 1, -1):
                msg_id = ws.cell(row=row_idx, column=COL_MSG_ID).value
                user = ws.cell(row=row_idx, column=COL_USER).value or ""
                if str(msg_id) == str(record.id) and user == record.user:
                    ws.delete_rows(row_idx)
                    return True
        return False

    def _append(self, ws: Worksheet, r: BudgetRecord) -> None:
        ws.append([r.date, float(r.amount.to_decimal()), r.category, r.description, r.user, str(r.id)])
        row_idx = ws.max_row
        ws.cell(row=row_idx, column=COL_DATE).number_format = DATE_FORMAT
        ws.cell(row=row_idx, column=COL_AMOUNT).number_format = MONEY_FORMAT

    def _sort(self, ws: Worksheet) -> None:
        rows = [
            [c.value for c in row]
            for row in ws.iter_rows(min_row=2, max_col=len(HEADERS))
        ]

        def key(values):
            msg_id = str(values[COL_MSG_ID - 1] or "")
            return (_as_date(values[COL_DATE - 1]), int(msg_id) if msg_id.lstrip("-").isdigit() else 0)

        rows.sort(key=key)
        for i, values in enumerate(rows, start=2):
            for col, v in enumerate(values, start=1):
                ws.cell(row=i, column=col, value=v)
            ws.cell(row=i, column=COL_DATE).number_format = DATE_FORMAT
            ws.cell(row=i, column=COL_AMOUNT).number_format = MONEY_FORMAT

    def write(self, event: HandlerEvent) -> None:
        wb = self._open()
        r = event.record
        replaced = event.kind is EventKind.UPDATE and self._remove(wb, r)
        ws = self._sheet(wb, r.date)
        self._append(ws, r)
        if replaced or r.date != self._today():
            self._sort(ws)
        ws.auto_filter.ref = f"A1:{get_column_letter(len(HEADERS))}{ws.max_row}"
        wb.save(self.path)
        log.info('record_%s sink="xlsx" id=%s sheet="%s"',
                 "updated" if replaced else "added", r.id, ws.title)

    async def handle_event(self, event: HandlerEvent) -> None:
        self.write(event)
