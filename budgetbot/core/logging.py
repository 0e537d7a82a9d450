# budgetbot/core/logging.py
# JSON-строка на событие + уровни. В режиме CLI пишем в stderr, stdout занят ответами.

from __future__ import annotations
import json
import logging
import sys
from typing import TextIO


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "ts": self.formatTime(record),
            "name": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    logger = logging.getLogger()
    logger.handlers.clear()
    logger.setLevel(level.upper())

    h = logging.StreamHandler(stream or sys.stdout)
    h.setFormatter(JsonFormatter())
    logger.addHandler(h)

    # aiogram и sqlalchemy слишком болтливы на DEBUG
    for noisy in ("aiogram.event", "sqlalchemy.engine"):
        logging.getLogger(noisy).setLevel(max(logger.level, logging.INFO))
