# budgetbot/services/parser/amount.py
# Сумма операции: проверенная числовая строка, запятая -> точка.

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

# Не больше двух знаков после разделителя, минус допускается.
_RX_AMOUNT = re.compile(r"-?\d+(?:[.,]\d{1,2})?", re.ASCII)


@dataclass(frozen=True)
class Amount:
    """
    Примеры:
      "42"    -> Amount("42")
      "42,13" -> Amount("42.13")
      "-42"   -> Amount("-42")
      "42."   -> ValueError
      "42.135"-> ValueError
    """
    value: str

    def __post_init__(self) -> None:
        if not _RX_AMOUNT.fullmatch(self.value or ""):
            raise ValueError(f"invalid amount: {self.value!r}")
        object.__setattr__(self, "value", self.value.replace(",", "."))

    @classmethod
    def parse(cls, text: str) -> Optional["Amount"]:
        if not text or not _RX_AMOUNT.fullmatch(text):
            return None
        return cls(text)

    def as_int(self) -> Optional[int]:
        # "2" -> 2, "2.50" -> None: дробная запись числом дней не считается
        if "." in self.value:
            return None
        return int(self.value)

    def to_decimal(self) -> Decimal:
        return Decimal(self.value)

    def __str__(self) -> str:
        return self.value
