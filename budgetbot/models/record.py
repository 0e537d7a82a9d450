# budgetbot/models/record.py
# Объявляем Base и модель Record (сохранённый BudgetRecord).

from __future__ import annotations

from datetime import datetime
from sqlalchemy import Column, Integer, BigInteger, String, Float, Date, DateTime, Index
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Record(Base):
    __tablename__ = "records"

    id = Column(Integer, primary_key=True)
    message_id = Column(BigInteger, nullable=False)       # id сообщения во входном канале
    username = Column(String(100), nullable=False, default="")
    date = Column(Date, nullable=False, index=True)       # дата траты с учётом "вчера" и т.п.
    amount = Column(Float, nullable=False)
    category = Column(String(100), nullable=False)
    description = Column(String(255), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)

    __table_args__ = (
        Index("ix_records_user_message", "username", "message_id", unique=True),
    )
