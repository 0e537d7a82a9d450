# budgetbot/services/parser/dates/russian.py
from __future__ import annotations

from .base import DateShiftParser, Weekday


class RussianDateShiftParser(DateShiftParser):
    """
    "вчера", "позавчера", "в прошлую пятницу", "в чт",
    "2 дня назад", "5 дней назад", "2 недели назад", "неделю назад".
    """

    language = "ru"

    relative_days = {"вчера": 1, "позавчера": 2}
    weekday_markers = frozenset({"прошлый", "прошлую", "прошлое", "в", "во"})
    weekdays = {
        "пн": Weekday.MON, "понедельник": Weekday.MON,
        "вт": Weekday.TUE, "вторник": Weekday.TUE,
        "ср": Weekday.WED, "среда": Weekday.WED, "среду": Weekday.WED,
        "чт": Weekday.THU, "четверг": Weekday.THU,
        "пт": Weekday.FRI, "пятница": Weekday.FRI, "пятницу": Weekday.FRI,
        "сб": Weekday.SAT, "суббота": Weekday.SAT, "субботу": Weekday.SAT,
        "вс": Weekday.SUN, "воскресенье": Weekday.SUN,
    }
    ago = frozenset({"назад"})
    day_units = frozenset({"день", "дня", "дней"})
    week_units = frozenset({"неделю", "недели", "недель"})
    single_day = frozenset({"день"})
    single_week = frozenset({"неделю"})
