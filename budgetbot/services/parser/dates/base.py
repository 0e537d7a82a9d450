# budgetbot/services/parser/dates/base.py
# Общая логика сдвига даты: "вчера", "3 дня назад", "в прошлый понедельник".
# Языки отличаются только таблицами слов (english.py, russian.py).

from __future__ import annotations

from datetime import date, timedelta
from enum import IntEnum
from typing import ClassVar, Mapping, Optional

from ..tokenizer import MessageTokens


class Weekday(IntEnum):
    # значения совпадают с date.weekday()
    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @classmethod
    def of(cls, d: date) -> "Weekday":
        return cls(d.weekday())


def days_since(today: Weekday, target: Weekday) -> int:
    """
    Сколько дней прошло с последнего target до today (0..6).
    >>> days_since(Weekday.FRI, Weekday.MON)
    4
    >>> days_since(Weekday.MON, Weekday.FRI)
    3
    >>> days_since(Weekday.WED, Weekday.WED)
    0
    """
    return (7 + int(today) - int(target)) % 7


def days_back_to(today: Weekday, target: Weekday) -> int:
    # сегодняшний день недели по имени = неделю назад, а не сегодня
    return days_since(today, target) or 7


def _reachable(today: date, shift: timedelta) -> bool:
    # "1000000 days ago" уводит за пределы date: такой сдвиг не считается
    try:
        today - shift
    except OverflowError:
        return False
    return True


PARSERS: dict[str, type["DateShiftParser"]] = {}


class DateShiftParser:
    """
    Сканирует токены слева направо, срабатывает ПЕРВЫЙ узнанный шаблон.
    Возвращает сдвиг назад от "сегодня" или None, если шаблона нет.
    """

    language: ClassVar[str] = ""

    # слово -> дни ("yesterday" -> 1)
    relative_days: ClassVar[Mapping[str, int]] = {}
    # "last"/"on" перед днём недели
    weekday_markers: ClassVar[frozenset[str]] = frozenset()
    weekdays: ClassVar[Mapping[str, Weekday]] = {}
    ago: ClassVar[frozenset[str]] = frozenset()
    # единицы после числа: "2 days ago"
    day_units: ClassVar[frozenset[str]] = frozenset()
    week_units: ClassVar[frozenset[str]] = frozenset()
    # без числа: "week ago"
    single_day: ClassVar[frozenset[str]] = frozenset()
    single_week: ClassVar[frozenset[str]] = frozenset()

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.language:
            PARSERS[cls.language] = cls

    def parse_date_shift(self, tokens: MessageTokens, today: Optional[date] = None) -> Optional[timedelta]:
        today = today or date.today()
        for i in range(len(tokens)):
            shift = self._match_at(tokens, i, today)
            if shift is not None and _reachable(today, shift):
                return shift
        return None

    def weekday(self, word: str) -> Optional[Weekday]:
        return self.weekdays.get(word.casefold())

    def _match_at(self, tokens: MessageTokens, i: int, today: date) -> Optional[timedelta]:
        t = tokens[i]
        nxt = tokens[i + 1] if i + 1 < len(tokens) else None

        if t.is_amount:
            n = t.amount.as_int() if t.amount else None
            after = tokens[i + 2] if i + 2 < len(tokens) else None
            if n is None or nxt is None or after is None or not after.is_word(*self.ago):
                return None
            try:
                if nxt.is_word(*self.day_units):
                    return timedelta(days=n)
                if nxt.is_word(*self.week_units):
                    return timedelta(weeks=n)
            except OverflowError:
                # больше, чем вмещает timedelta
                return None
            return None

        if t.is_signs:
            return None

        word = t.text.casefold()
        if word in self.relative_days:
            return timedelta(days=self.relative_days[word])

        if word in self.weekday_markers and nxt is not None and nxt.is_word(*self.weekdays):
            wd = self.weekday(nxt.text)
            return timedelta(days=days_back_to(Weekday.of(today), wd))

        if nxt is not None and nxt.is_word(*self.ago):
            if word in self.single_week:
                return timedelta(weeks=1)
            if word in self.single_day:
                return timedelta(days=1)
        return None


def get_date_parser(language: str) -> DateShiftParser:
    try:
        return PARSERS[language.lower()]()
    except KeyError:
        raise ValueError(f"unsupported language: {language!r} (known: {', '.join(sorted(PARSERS))})") from None
