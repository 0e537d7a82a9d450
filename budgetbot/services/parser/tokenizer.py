# budgetbot/services/parser/tokenizer.py
# Разбиение сообщения на токены: слово / сумма / хвостовые знаки препинания.

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from .amount import Amount

TRAILING_SIGNS = ".,:;!?"


class TokenKind(Enum):
    WORD = "word"
    AMOUNT = "amount"
    TRAILING_SIGNS = "trailing_signs"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    amount: Optional[Amount] = None

    @classmethod
    def word(cls, text: str) -> "Token":
        return cls(TokenKind.WORD, text)

    @classmethod
    def signs(cls, text: str) -> "Token":
        return cls(TokenKind.TRAILING_SIGNS, text)

    @classmethod
    def of_amount(cls, text: str, amount: Amount) -> "Token":
        return cls(TokenKind.AMOUNT, text, amount)

    @property
    def is_amount(self) -> bool:
        return self.kind is TokenKind.AMOUNT

    @property
    def is_signs(self) -> bool:
        return self.kind is TokenKind.TRAILING_SIGNS

    def is_word(self, *variants: str) -> bool:
        """Слово без учёта регистра совпадает с одним из вариантов."""
        if self.kind is not TokenKind.WORD:
            return False
        folded = self.text.casefold()
        return any(folded == v.casefold() for v in variants)


MessageTokens = List[Token]


def tokenize(text: str) -> MessageTokens:
    """
    Порядок токенов совпадает с исходным текстом:
      "banana 3,50."  -> [Word(banana), Amount(3.50), Signs(.)]
      "one, two"      -> [Word(one), Signs(,), Word(two)]
      "?"             -> [Word(), Signs(?)]
    """
    result: MessageTokens = []
    for chunk in (text or "").split():
        word = chunk.rstrip(TRAILING_SIGNS)
        amount = Amount.parse(word)
        if amount is not None:
            result.append(Token.of_amount(word, amount))
        else:
            result.append(Token.word(word))
        if len(word) != len(chunk):
            result.append(Token.signs(chunk[len(word):]))
    return result


def render(tokens: Iterable[Token]) -> str:
    # хвостовые знаки приклеиваем к предыдущему токену без пробела
    parts: list[str] = []
    for t in tokens:
        if t.is_signs and parts:
            parts[-1] += t.text
        else:
            parts.append(t.text)
    return " ".join(parts)
