# budgetbot/repo/records.py
from __future__ import annotations
from datetime import datetime

from sqlalchemy import select, and_
from sqlalchemy.ext.asyncio import AsyncSession

from budgetbot.models.record import Record
from budgetbot.services.events import BudgetRecord


def _apply(row: Record, rec: BudgetRecord) -> None:
    row.date = rec.date
    row.amount = float(rec.amount.to_decimal())
    row.category = rec.category
    row.description = rec.description
    row.username = rec.user


async def get_record(session: AsyncSession, message_id: int, user: str) -> Record | None:
    q = await session.execute(select(Record).where(
        and_(Record.message_id == message_id, Record.username == user)
    ))
    return q.scalar_one_or_none()


async def add_record(session: AsyncSession, rec: BudgetRecord) -> Record:
    row = Record(message_id=rec.id, created_at=datetime.utcnow())
    _apply(row, rec)
    session.add(row)
    await session.flush()
    return row


async def update_record(session: AsyncSession, rec: BudgetRecord) -> Record | None:
    row = await get_record(session, rec.id, rec.user)
    if not row:
        return None
    _apply(row, rec)
    row.updated_at = datetime.utcnow()
    await session.flush()
    return row


async def list_records(session: AsyncSession, user: str | None = None) -> list[Record]:
    stmt = select(Record).order_by(Record.date, Record.message_id)
    if user is not None:
        stmt = stmt.where(Record.username == user)
    q = await session.execute(stmt)
    return list(q.scalars().all())
