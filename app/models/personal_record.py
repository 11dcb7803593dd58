"""
PersonalRecord: one observed lift for a (user, movement) pair.

Append-only: a user may log many records for the same movement over time,
including several on the same date. Rankings are derived from this table on
every request and never stored.
"""
import datetime as dt
from decimal import Decimal
from sqlalchemy import Integer, Numeric, Date, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base


class PersonalRecord(Base):
    __tablename__ = "personal_records"
    __table_args__ = (
        Index("ix_personal_records_movement_user", "movement_id", "user_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    movement_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("movements.id", ondelete="CASCADE"), nullable=False
    )
    value: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)
