# budgetbot/models/category.py
from __future__ import annotations

from sqlalchemy import Column, Integer, String, Index

from budgetbot.models.record import Base


class CategoryRow(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    priority = Column(Integer, nullable=False)   # меньше = важнее
    name = Column(String(100), nullable=False)
    lexemes = Column(String(1000), nullable=False, default="")   # "cand,sweet,chocolate"

    __table_args__ = (
        Index("ix_categories_priority_name", "priority", "name", unique=True),
    )
