"""
Общие фикстуры:
- categorizer: Sweets(10) / Fruits(20) / Others(99999)
- TODAY: фиксированный четверг, чтобы расчёт дней недели не зависел от часов
"""
from datetime import date

import pytest

from budgetbot.services.events import EventHandler
from budgetbot.services.parser.categorizer import Category, Categorizer, CategorySet
from budgetbot.services.parser.dates import get_date_parser
from budgetbot.services.parser.interpreter import MessageInterpreter

# 2026-10-15 — четверг
TODAY = date(2026, 10, 15)


def sweets() -> Category:
    return Category.from_row(10, "Sweets", "cand,sweet,chocolate")


def fruits() -> Category:
    return Category.from_row(20, "Fruits", "apple,banana,orange")


def others() -> Category:
    return Category.from_row(99999, "Others", "other,misc")


@pytest.fixture
def categorizer() -> Categorizer:
    cs = CategorySet()
    cs.add(sweets())
    cs.add(fruits())
    cs.add(others())
    return cs.freeze()


@pytest.fixture
def interpreter(categorizer) -> MessageInterpreter:
    return MessageInterpreter(categorizer, get_date_parser("en"), today=lambda: TODAY)


@pytest.fixture
def ru_interpreter(categorizer) -> MessageInterpreter:
    return MessageInterpreter(categorizer, get_date_parser("ru"), today=lambda: TODAY)


class MemorySink(EventHandler):
    name = "memory"

    def __init__(self, fail: bool = False) -> None:
        self.events = []
        self.fail = fail

    async def handle_event(self, event) -> None:
        if self.fail:
            raise OSError("disk is full")
        self.events.append(event)


@pytest.fixture
def memory_sink() -> MemorySink:
    return MemorySink()
