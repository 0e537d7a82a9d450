# budgetbot/repo/categories.py
from __future__ import annotations
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from budgetbot.models.category import CategoryRow


async def list_categories(session: AsyncSession) -> list[tuple[int, str, str]]:
    # порядок вставки = порядок id
    q = await session.execute(select(CategoryRow).order_by(CategoryRow.id))
    return [(r.priority, r.name, r.lexemes or "") for r in q.scalars().all()]


async def save_category(session: AsyncSession, priority: int, name: str, lexemes: str) -> None:
    # upsert-поведение: если есть — обновим лексемы
    q = await session.execute(
        select(CategoryRow).where(CategoryRow.priority == priority, CategoryRow.name == name)
    )
    row = q.scalar_one_or_none()
    if row:
        row.lexemes = lexemes
        return
    session.add(CategoryRow(priority=priority, name=name, lexemes=lexemes))
    await session.flush()
