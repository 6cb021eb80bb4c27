"""
examprep/knowledge/models.py
SQLAlchemy ORM models for the subject catalog.
"""
from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class SubjectRecord(Base):
    __tablename__ = "subjects"

    code: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    total_questions: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Catalog display order; the report card lists subjects in this order.
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0, index=True)
