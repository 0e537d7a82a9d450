# budgetbot/cli.py
# Консольный ввод: каждая непустая строка stdin — новое сообщение.

from __future__ import annotations

import asyncio
import getpass
import logging
import sys
from typing import TextIO

from budgetbot.services.events import EventHandler
from budgetbot.services.parser.interpreter import Input, MessageInterpreter

log = logging.getLogger(__name__)


def _default_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "console"


class ConsoleInputHandler:
    name = "CLI"

    def __init__(
        self,
        interpreter: MessageInterpreter,
        sink: EventHandler,
        user: str | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.interpreter = interpreter
        self.sink = sink
        self.user = user or _default_user()
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout

    def _print(self, text: str) -> None:
        print(text, file=self.stdout, flush=True)

    async def handle_line(self, counter: int, line: str) -> None:
        output = self.interpreter.handle_message(Input(id=counter, user=self.user, text=line, is_new=True))
        if output is None:
            self._print("Error")
            return
        try:
            for event in output.events:
                await self.sink.handle_event(event)
        except Exception:
            log.exception('sink_failed sink="%s" id=%s', self.sink.name, counter)
            self._print("Error")
            return
        self._print(output.text)

    async def start(self) -> int:
        """Читает до EOF или пустой строки. Возвращает число обработанных строк."""
        counter = 0
        while True:
            line = await asyncio.to_thread(self.stdin.readline)
            if not line or not line.strip():
                break
            counter += 1
            await self.handle_line(counter, line)
        return counter
