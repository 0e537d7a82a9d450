# budgetbot/core/db.py
# Async SQLAlchemy + session factory + инициализация схемы

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Один движок на приложение, создаётся в configure()
engine: Optional[AsyncEngine] = None
Session: Optional[async_sessionmaker[AsyncSession]] = None


def configure(database_url: str) -> AsyncEngine:
    global engine, Session
    engine = create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
    )
    Session = async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    return engine


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """
    Контекст для работы с БД:
    >>> async with session_scope() as s:
    ...     await s.execute(...)
    """
    if Session is None:
        raise RuntimeError("database is not configured, call configure() first")
    session: AsyncSession = Session()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def init_db() -> None:
    """
    Создание таблиц для старта без Alembic.
    Все модели используют общий Base из budgetbot.models.record.
    """
    from budgetbot.models.record import Base
    import budgetbot.models.category  # noqa: F401  регистрирует таблицу categories

    if engine is None:
        raise RuntimeError("database is not configured, call configure() first")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose() -> None:
    global engine, Session
    if engine is not None:
        await engine.dispose()
    engine = None
    Session = None
