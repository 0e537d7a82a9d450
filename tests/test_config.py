"""Tests for Settings.load()."""
import pytest

from budgetbot.core.config import Settings

ENV_VARS = (
    "INPUT", "BOT_TOKEN", "LANGUAGE", "CATEGORIES_SOURCE", "CATEGORIES_CSV", "EVENT_SINK",
    "RECORDS_CSV", "RECORDS_XLSX", "XLSX_SHEET_FORMAT", "DATABASE_URL", "TZ", "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestSettings:

    def test_defaults(self):
        s = Settings.load()
        assert (s.input, s.language, s.categories_source, s.event_sink) == ("cli", "en", "csv", "csv")
        assert s.categories_csv == "categories.csv"
        assert s.xlsx_sheet_format == "%Y-%m"
        assert s.tz == "UTC"
        assert s.log_level == "INFO"
        assert not s.needs_database

    def test_telegram_requires_token(self, monkeypatch):
        monkeypatch.setenv("INPUT", "telegram")
        with pytest.raises(RuntimeError, match="BOT_TOKEN"):
            Settings.load()
        monkeypatch.setenv("BOT_TOKEN", "123:ABC")
        assert Settings.load().bot_token == "123:ABC"

    def test_db_requires_url(self, monkeypatch):
        monkeypatch.setenv("EVENT_SINK", "db")
        with pytest.raises(RuntimeError, match="DATABASE_URL"):
            Settings.load()
        monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///budget.db")
        assert Settings.load().needs_database

    def test_unknown_choice(self, monkeypatch):
        monkeypatch.setenv("LANGUAGE", "de")
        with pytest.raises(RuntimeError, match="LANGUAGE"):
            Settings.load()

    def test_values_are_normalized(self, monkeypatch):
        monkeypatch.setenv("LANGUAGE", " RU ")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = Settings.load()
        assert s.language == "ru"
        assert s.log_level == "DEBUG"


class TestStartupWiring:

    @pytest.mark.asyncio
    async def test_default_categories_for_language(self):
        import dataclasses
        from budgetbot.main import load_categorizer

        s = dataclasses.replace(Settings.load(), categories_source="default", language="ru")
        c = await load_categorizer(s)
        assert c.default_category.name == "Прочее"

    @pytest.mark.asyncio
    async def test_csv_categories(self, tmp_path):
        import dataclasses
        from budgetbot.main import load_categorizer

        path = tmp_path / "c.csv"
        path.write_text("priority;name;lexemes\n1;Tea;tea\n9;Rest;\n", encoding="utf-8")
        c = await load_categorizer(dataclasses.replace(Settings.load(), categories_csv=str(path)))
        assert c.classify_text("tea 2").name == "Tea"

    def test_make_today(self):
        from datetime import date, timedelta
        from budgetbot.main import make_today

        assert abs(make_today("Europe/Minsk")() - date.today()) <= timedelta(days=1)
