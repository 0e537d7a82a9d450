# budgetbot/services/providers.py
# Источники таблицы категорий: CSV-файл, статический список, встроенные наборы, БД.
# Формат строки везде один: (priority, name, "лексема1,лексема2").

from __future__ import annotations

import csv
import logging
from pathlib import Path
from typing import Iterable, Sequence

from budgetbot.services.parser.categorizer import Category

log = logging.getLogger(__name__)

CategoryRowT = tuple[int, str, str]

# Встроенные наборы. Последняя по рангу (наибольший priority) — "прочее".
DEFAULT_CATEGORIES: dict[str, list[CategoryRowT]] = {
    "en": [
        (10, "Groceries", "grocer,bread,milk,chees,egg,butter,meat,chicken,fish,vegetab,fruit,apple,banana,orange"),
        (20, "Sweets", "cand,sweet,chocolate,cake,pie,cookie,ice-cream,dessert"),
        (30, "Eating out", "cafe,restaurant,lunch,dinner,breakfast,pizza,burger,coffee,latte,cappuccino"),
        (40, "Transport", "taxi,uber,bus,metro,subway,train,tram,ticket,fuel,petrol,gas,parking"),
        (50, "Health", "pharm,drug,medic,doctor,dentist,vitamin,pill"),
        (60, "Home", "rent,electric,water,internet,phone,furnit,clean,soap"),
        (70, "Clothes", "shirt,shoe,jeans,dress,jacket,coat,sock"),
        (80, "Entertainment", "cinema,movie,concert,theat,game,book,netflix,spotify"),
        (99999, "Others", "other,misc"),
    ],
    "ru": [
        (10, "Продукты", "продукт,хлеб,молок,сыр,яйц,масл,мяс,куриц,рыб,овощ,фрукт,яблок,банан,апельсин"),
        (20, "Сладкое", "конфет,сладк,шоколад,торт,пирог,пирож,печен,морожен,десерт"),
        (30, "Кафе", "кафе,ресторан,обед,ужин,завтрак,пицц,бургер,кофе,латте,капучино"),
        (40, "Транспорт", "такси,автобус,метро,поезд,электричк,трамва,билет,бензин,топлив,парковк"),
        (50, "Здоровье", "аптек,лекарств,врач,стоматолог,витамин,таблетк"),
        (60, "Дом", "аренд,квартплат,свет,электричеств,вода,интернет,связь,мебел,уборк,мыло"),
        (70, "Одежда", "рубашк,обув,джинс,плать,куртк,пальто,носк"),
        (80, "Развлечения", "кино,фильм,концерт,театр,игр,книг"),
        (99999, "Прочее", "прочее,разное"),
    ],
}


class StaticCategoryProvider:
    def __init__(self, rows: Iterable[CategoryRowT]) -> None:
        self._rows = list(rows)

    def categories(self) -> Sequence[Category]:
        out: list[Category] = []
        for priority, name, lexemes in self._rows:
            out.append(Category.from_row(priority, name, lexemes))
        return out


def default_provider(language: str) -> StaticCategoryProvider:
    try:
        return StaticCategoryProvider(DEFAULT_CATEGORIES[language])
    except KeyError:
        raise ValueError(f"no default categories for language {language!r}") from None


class CsvCategoryProvider:
    """
    categories.csv, разделитель ';':
        priority;name;lexemes
        10;Sweets;cand,sweet,chocolate
        99999;Others;other,misc
    Битые строки пропускаем с предупреждением.
    """

    def __init__(self, path: str | Path, delimiter: str = ";") -> None:
        self.path = Path(path)
        self.delimiter = delimiter

    def categories(self) -> Sequence[Category]:
        out: list[Category] = []
        with self.path.open(newline="", encoding="utf-8") as fh:
            reader = csv.DictReader(fh, delimiter=self.delimiter)
            for line_no, row in enumerate(reader, start=2):
                name = (row.get("name") or "").strip()
                raw_priority = (row.get("priority") or "").strip()
                if not name:
                    log.warning('category_skipped file="%s" line=%s reason="missing name"', self.path, line_no)
                    continue
                try:
                    priority = int(raw_priority)
                except ValueError:
                    log.warning('category_skipped file="%s" line=%s reason="bad priority %r"',
                                self.path, line_no, raw_priority)
                    continue
                out.append(Category.from_row(priority, name, row.get("lexemes")))
        log.info('categories_loaded source="%s" count=%s', self.path, len(out))
        return out


async def db_provider() -> StaticCategoryProvider:
    """Таблица categories читается один раз при старте."""
    from budgetbot.core.db import session_scope
    from budgetbot.repo.categories import list_categories

    async with session_scope() as s:
        rows = await list_categories(s)
    log.info('categories_loaded source="db" count=%s', len(rows))
    return StaticCategoryProvider(rows)
