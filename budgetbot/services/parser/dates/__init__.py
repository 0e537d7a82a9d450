# budgetbot/services/parser/dates/__init__.py
# Регистрация языков: модуль языка добавляет свой класс в PARSERS.
from __future__ import annotations

from .base import PARSERS, DateShiftParser, Weekday, days_since, get_date_parser
from .english import EnglishDateShiftParser
from .russian import RussianDateShiftParser

__all__ = [
    "PARSERS",
    "DateShiftParser",
    "EnglishDateShiftParser",
    "RussianDateShiftParser",
    "Weekday",
    "days_since",
    "get_date_parser",
]
