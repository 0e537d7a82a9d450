# budgetbot/services/parser/categorizer.py
# Определение категории по лексемам (префиксам слов) с учётом приоритета.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import cmp_to_key
from typing import Iterable, Protocol, Sequence

from .tokenizer import MessageTokens, TokenKind, tokenize

log = logging.getLogger(__name__)


class CategoriesNotLoadedError(RuntimeError):
    """Классификатор запрошен без единой загруженной категории."""


def parse_lexemes(raw: str | Iterable[str] | None) -> tuple[str, ...]:
    """
    "Cand, Sweet,,chocolate" -> ("cand", "sweet", "chocolate")
    Пустые лексемы выбрасываем: пустой префикс совпал бы с любым словом.
    """
    if raw is None:
        return ()
    parts = raw.split(",") if isinstance(raw, str) else raw
    out = []
    for p in parts:
        lx = p.strip().lower()
        if lx:
            out.append(lx)
    return tuple(out)


@dataclass(frozen=True)
class Category:
    name: str
    priority: int
    lexemes: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def from_row(cls, priority: int | str, name: str, lexemes: str | None) -> "Category":
        return cls(name=name.strip(), priority=int(priority), lexemes=parse_lexemes(lexemes))

    def match_word(self, word: str) -> bool:
        w = word.strip().lower()
        return any(w.startswith(lx) for lx in self.lexemes)


def compare_categories(a: Category, b: Category) -> int:
    """
    <0, если a важнее b. Меньший priority важнее,
    при равном приоритете важнее лексически большее имя.
    """
    if a.priority != b.priority:
        return -1 if a.priority < b.priority else 1
    if a.name != b.name:
        return -1 if a.name > b.name else 1
    return 0


rank_key = cmp_to_key(compare_categories)


class CategoryProvider(Protocol):
    def categories(self) -> Sequence[Category]: ...


class CategorySet:
    """
    Этап загрузки. Классифицировать отсюда нельзя: сначала freeze().
    Дубликаты по (priority, name) игнорируются, побеждает первый.
    """

    def __init__(self) -> None:
        self._items: dict[tuple[int, str], Category] = {}

    def __len__(self) -> int:
        return len(self._items)

    def add(self, category: Category) -> bool:
        key = (category.priority, category.name)
        if key in self._items:
            log.debug('category_duplicate priority=%s name="%s"', category.priority, category.name)
            return False
        self._items[key] = category
        return True

    def load(self, provider: CategoryProvider) -> int:
        added = 0
        for c in provider.categories():
            if self.add(c):
                added += 1
        return added

    def freeze(self) -> "Categorizer":
        if not self._items:
            raise CategoriesNotLoadedError("categories must be loaded before classifying text")
        return Categorizer(self._items.values())


class Categorizer:
    """Только чтение: после создания набор категорий не меняется."""

    def __init__(self, categories: Iterable[Category]) -> None:
        ordered = sorted(categories, key=rank_key)
        if not ordered:
            raise CategoriesNotLoadedError("categories must be loaded before classifying text")
        self._ordered: tuple[Category, ...] = tuple(ordered)

    @classmethod
    def from_provider(cls, provider: CategoryProvider) -> "Categorizer":
        cs = CategorySet()
        cs.load(provider)
        return cs.freeze()

    @property
    def categories(self) -> tuple[Category, ...]:
        """От самой важной к наименее важной."""
        return self._ordered

    @property
    def default_category(self) -> Category:
        # "Прочее": последняя по рангу (наибольший priority)
        # TODO: вынести выбор категории по умолчанию в настройки провайдера
        return self._ordered[-1]

    def classify(self, tokens: MessageTokens) -> Category:
        words = [t.text for t in tokens if t.kind is TokenKind.WORD]
        # категории уже упорядочены по рангу: первая совпавшая и есть лучшая
        for c in self._ordered:
            if any(c.match_word(w) for w in words):
                return c
        return self.default_category

    def classify_text(self, text: str) -> Category:
        return self.classify(tokenize(text))
