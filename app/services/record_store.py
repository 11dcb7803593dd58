"""
Record store: the read-only data source behind the ranking engine.

`RecordStore` is the contract the engine depends on; `SqlRecordStore` fulfils
it over a SQLAlchemy session. The session is passed in by the caller (one per
request), the store never opens or closes connections itself.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.errors import DataSourceError
from app.core.logging import get_logger
from app.models.movement import Movement
from app.models.personal_record import PersonalRecord
from app.models.user import User

logger = get_logger(__name__)


@dataclass(frozen=True)
class Observation:
    """One personal-record row joined with its user's name."""
    user_id: int
    user_name: str
    value: Decimal
    date: date


class RecordStore(Protocol):
    def find_movement(self, key: str) -> Optional[Movement]:
        ...

    def list_observations(self, movement_id: int) -> Sequence[Observation]:
        ...


MAX_MOVEMENT_ID = 2**31 - 1  # movements.id is a 32-bit INTEGER


def _parse_movement_id(key: str) -> Optional[int]:
    candidate = key.strip()
    if not (candidate.isascii() and candidate.isdigit()):
        return None
    movement_id = int(candidate)
    if not 0 < movement_id <= MAX_MOVEMENT_ID:
        return None
    return movement_id


class SqlRecordStore:
    def __init__(self, db: Session):
        self.db = db

    def find_movement(self, key: str) -> Optional[Movement]:
        """
        Resolve a movement by numeric id (when `key` parses as one) or by
        exact name. An id match wins over a movement literally named `key`.
        """
        movement_id = _parse_movement_id(key)
        try:
            if movement_id is not None:
                movement = self.db.get(Movement, movement_id)
                if movement is not None:
                    return movement
            return self.db.execute(
                select(Movement).where(Movement.name == key)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error(
                "find_movement failed",
                extra={"operation": "find_movement", "movement_key": key, "error": str(exc)},
            )
            raise DataSourceError("find_movement", {"movement_key": key}) from exc

    def list_observations(self, movement_id: int) -> list[Observation]:
        stmt = (
            select(
                PersonalRecord.user_id,
                User.name,
                PersonalRecord.value,
                PersonalRecord.date,
            )
            .join(User, User.id == PersonalRecord.user_id)
            .where(PersonalRecord.movement_id == movement_id)
        )
        try:
            rows = self.db.execute(stmt).all()
        except SQLAlchemyError as exc:
            logger.error(
                "list_observations failed",
                extra={"operation": "list_observations", "movement_id": movement_id, "error": str(exc)},
            )
            raise DataSourceError("list_observations", {"movement_id": movement_id}) from exc

        return [
            Observation(user_id=user_id, user_name=name, value=value, date=day)
            for user_id, name, value, day in rows
        ]
