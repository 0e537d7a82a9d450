# budgetbot/__init__.py
"""Бот учёта расходов: свободный текст -> запись бюджета."""

__version__ = "0.3.0"
