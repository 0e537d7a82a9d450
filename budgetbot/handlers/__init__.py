# budgetbot/handlers/__init__.py
from __future__ import annotations

from typing import Iterable
from aiogram import Dispatcher, Router
import logging

def _module_names() -> Iterable[str]:
    # ПОРЯДОК ВАЖЕН: команды раньше свободного текста
    return (
        "start",
        "records",
    )

def setup(dp: Dispatcher) -> None:
    for name in _module_names():
        mod = __import__(f"budgetbot.handlers.{name}", fromlist=["router"])
        router: Router = getattr(mod, "router")
        dp.include_router(router)
        logging.info('handler_loaded name="%s"', name)
