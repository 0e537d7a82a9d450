# budgetbot/services/parser/interpreter.py
# Единая точка входа парсера: свободный текст -> BudgetRecord.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Callable, Optional

from budgetbot.services.events import BudgetRecord, EventKind, HandlerEvent, RecordId

from .amount import Amount
from .categorizer import Categorizer
from .dates import DateShiftParser
from .tokenizer import MessageTokens, TokenKind, tokenize

log = logging.getLogger(__name__)

REPLY_HEADERS = {
    EventKind.ADD: "Added new record",
    EventKind.UPDATE: "Updated record",
}


@dataclass(frozen=True)
class Input:
    id: RecordId
    user: str
    text: str
    is_new: bool = True


@dataclass(frozen=True)
class Output:
    text: str
    events: list[HandlerEvent] = field(default_factory=list)


def extract_amount(tokens: MessageTokens) -> Optional[Amount]:
    """Первая сумма в сообщении: "5 for 2 kg of candies" -> 5."""
    return next((t.amount for t in tokens if t.kind is TokenKind.AMOUNT), None)


def extract_description(tokens: MessageTokens) -> str:
    """
    Слова через один пробел, хвостовые знаки остаются при своём слове.
    Знаки после суммы (или в начале) выбрасываются:
      "9,75. Chocolate pie" -> "Chocolate pie"
    """
    parts: list[str] = []
    prev: Optional[TokenKind] = None
    for t in tokens:
        if t.kind is TokenKind.WORD:
            parts.append(t.text)
        elif t.kind is TokenKind.TRAILING_SIGNS and prev is TokenKind.WORD:
            parts[-1] += t.text
        prev = t.kind
    return " ".join(parts)


def build_reply(event: HandlerEvent) -> str:
    r = event.record
    return (
        f"{REPLY_HEADERS[event.kind]} #{r.id}\n"
        f"Date: {r.date.isoformat()}\n"
        f"Category: {r.category}\n"
        f"Amount: {r.amount}"
    )


class MessageInterpreter:
    """
    Без состояния между вызовами: категории заморожены, парсер дат без полей.
    Можно вызывать из нескольких задач одновременно.
    """

    def __init__(
        self,
        categorizer: Categorizer,
        date_parser: DateShiftParser,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.categorizer = categorizer
        self.date_parser = date_parser
        self._today = today

    def interpret(self, text: str, *, record_id: RecordId = 0, user: str = "") -> Optional[BudgetRecord]:
        tokens = tokenize(text)
        amount = extract_amount(tokens)
        if amount is None:
            return None

        category = self.categorizer.classify(tokens)
        today = self._today()
        shift = self.date_parser.parse_date_shift(tokens, today=today) or timedelta(0)

        return BudgetRecord(
            id=record_id,
            date=today - shift,
            category=category.name,
            amount=amount,
            description=extract_description(tokens),
            user=user,
        )

    def handle_message(self, message: Input) -> Optional[Output]:
        log.debug("input=%r", message)
        record = self.interpret(message.text, record_id=message.id, user=message.user)
        if record is None:
            log.debug("no amount in message id=%s", message.id)
            return None

        event = HandlerEvent.add(record) if message.is_new else HandlerEvent.update(record)
        output = Output(text=build_reply(event), events=[event])
        log.debug("output=%r", output)
        return output
