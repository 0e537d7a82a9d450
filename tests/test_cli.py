"""Tests for the console input adapter."""
import io

import pytest

from budgetbot.cli import ConsoleInputHandler
from budgetbot.services.events import EventKind

from .conftest import TODAY, MemorySink


class TestConsoleInput:

    @pytest.mark.asyncio
    async def test_each_line_is_a_new_record(self, interpreter, memory_sink):
        stdin = io.StringIO("10 for banana chocolates\nhello\ntea 3\n")
        stdout = io.StringIO()
        handler = ConsoleInputHandler(interpreter, memory_sink, user="alice", stdin=stdin, stdout=stdout)

        assert await handler.start() == 3

        assert [e.record.id for e in memory_sink.events] == [1, 3]
        assert all(e.kind is EventKind.ADD for e in memory_sink.events)
        assert memory_sink.events[0].record.user == "alice"
        out = stdout.getvalue()
        assert f"Added new record #1\nDate: {TODAY.isoformat()}\nCategory: Sweets\nAmount: 10\n" in out
        assert "Error\n" in out
        assert "Category: Others" in out

    @pytest.mark.asyncio
    async def test_stops_on_empty_line(self, interpreter, memory_sink):
        stdin = io.StringIO("tea 3\n\napple 1\n")
        handler = ConsoleInputHandler(interpreter, memory_sink, user="u", stdin=stdin, stdout=io.StringIO())
        assert await handler.start() == 1
        assert len(memory_sink.events) == 1

    @pytest.mark.asyncio
    async def test_sink_failure_prints_error(self, interpreter):
        stdout = io.StringIO()
        handler = ConsoleInputHandler(interpreter, MemorySink(fail=True), user="u",
                                      stdin=io.StringIO("tea 3\n"), stdout=stdout)
        await handler.start()
        assert stdout.getvalue() == "Error\n"

    @pytest.mark.asyncio
    async def test_far_away_date_does_not_stop_the_session(self, interpreter, memory_sink):
        stdin = io.StringIO("tea 5 1000000 days ago\ntea 3\n")
        stdout = io.StringIO()
        handler = ConsoleInputHandler(interpreter, memory_sink, user="u", stdin=stdin, stdout=stdout)

        assert await handler.start() == 2

        assert [e.record.id for e in memory_sink.events] == [1, 2]
        assert all(e.record.date == TODAY for e in memory_sink.events)
        assert "Error" not in stdout.getvalue()
