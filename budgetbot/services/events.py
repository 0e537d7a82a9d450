# budgetbot/services/events.py
# Результат разбора (BudgetRecord) и событие для хранилища (Add/Update).

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from enum import Enum

from budgetbot.services.parser.amount import Amount

RecordId = int


@dataclass(frozen=True)
class BudgetRecord:
    id: RecordId           # id сообщения во входном канале
    date: date
    category: str
    amount: Amount
    description: str
    user: str


class EventKind(Enum):
    ADD = "add"
    UPDATE = "update"


@dataclass(frozen=True)
class HandlerEvent:
    kind: EventKind
    record: BudgetRecord

    @classmethod
    def add(cls, record: BudgetRecord) -> "HandlerEvent":
        return cls(EventKind.ADD, record)

    @classmethod
    def update(cls, record: BudgetRecord) -> "HandlerEvent":
        return cls(EventKind.UPDATE, record)


class EventHandler(ABC):
    """Хранилище записей. Ядро его не вызывает: события отдаёт входной адаптер."""

    name: str = "events"

    @abstractmethod
    async def handle_event(self, event: HandlerEvent) -> None: ...

    async def close(self) -> None:
        return None
