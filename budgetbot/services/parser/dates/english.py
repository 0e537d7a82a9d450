# budgetbot/services/parser/dates/english.py
from __future__ import annotations

from .base import DateShiftParser, Weekday


class EnglishDateShiftParser(DateShiftParser):
    """
    "yesterday", "last Monday", "on fri", "2 days ago", "3 weeks ago", "a week ago".
    """

    language = "en"

    relative_days = {"yesterday": 1}
    weekday_markers = frozenset({"last", "on"})
    weekdays = {
        "monday": Weekday.MON, "mon": Weekday.MON,
        "tuesday": Weekday.TUE, "tue": Weekday.TUE,
        "wednesday": Weekday.WED, "wed": Weekday.WED,
        "thursday": Weekday.THU, "thu": Weekday.THU,
        "friday": Weekday.FRI, "fri": Weekday.FRI,
        "saturday": Weekday.SAT, "sat": Weekday.SAT,
        "sunday": Weekday.SUN, "sun": Weekday.SUN,
    }
    ago = frozenset({"ago"})
    day_units = frozenset({"days", "day"})
    week_units = frozenset({"weeks", "week"})
    single_day = frozenset({"day"})
    single_week = frozenset({"week"})
