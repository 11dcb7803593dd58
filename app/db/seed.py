"""
Reference data for users, movements and personal records.

Used by the 0002 migration and the test suite, and runnable on its own:

    python -m app.db.seed            # insert reference data
    python -m app.db.seed --clear    # wipe the three tables, then insert
"""
from __future__ import annotations

import argparse
import sys
from datetime import date
from decimal import Decimal

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.logging import get_logger, setup_logging
from app.db.base import SessionLocal
from app.models.movement import Movement
from app.models.personal_record import PersonalRecord
from app.models.user import User

logger = get_logger(__name__)

USERS = [
    (1, "Joao"),
    (2, "Jose"),
    (3, "Paulo"),
]

MOVEMENTS = [
    (1, "Deadlift"),
    (2, "Back Squat"),
    (3, "Bench Press"),
]

# (user_id, movement_id, value, date)
PERSONAL_RECORDS = [
    (1, 1, "100.0", "2021-01-01"),
    (1, 1, "180.0", "2021-01-02"),
    (1, 1, "150.0", "2021-01-03"),
    (1, 1, "110.0", "2021-01-04"),
    (2, 1, "110.0", "2021-01-04"),
    (2, 1, "140.0", "2021-01-05"),
    (2, 1, "190.0", "2021-01-06"),
    (3, 1, "170.0", "2021-01-01"),
    (3, 1, "120.0", "2021-01-02"),
    (3, 1, "130.0", "2021-01-03"),
    (1, 2, "130.0", "2021-01-03"),
    (2, 2, "130.0", "2021-01-03"),
    (3, 2, "125.0", "2021-01-03"),
    (1, 2, "110.0", "2021-01-05"),
    (1, 2, "100.0", "2021-01-01"),
    (2, 2, "120.0", "2021-01-01"),
    (3, 2, "120.0", "2021-01-01"),
]


def user_rows() -> list[dict]:
    return [{"id": uid, "name": name} for uid, name in USERS]


def movement_rows() -> list[dict]:
    return [{"id": mid, "name": name} for mid, name in MOVEMENTS]


def personal_record_rows() -> list[dict]:
    return [
        {
            "user_id": uid,
            "movement_id": mid,
            "value": Decimal(value),
            "date": date.fromisoformat(day),
        }
        for uid, mid, value, day in PERSONAL_RECORDS
    ]


def clear_reference_data(db: Session) -> None:
    """Delete all personal records, users and movements (children first)."""
    for model in (PersonalRecord, User, Movement):
        db.execute(delete(model))
    db.commit()


def seed_reference_data(db: Session) -> int:
    """Insert the reference rows unless movements already exist. Returns rows added."""
    if db.query(Movement).count() > 0:
        logger.info("Reference data already present, skipping seed")
        return 0

    db.add_all(User(**row) for row in user_rows())
    db.add_all(Movement(**row) for row in movement_rows())
    db.flush()
    db.add_all(PersonalRecord(**row) for row in personal_record_rows())
    db.commit()

    added = len(USERS) + len(MOVEMENTS) + len(PERSONAL_RECORDS)
    logger.info("Seeded reference data", extra={"rows": added})
    return added


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Load movement ranking reference data.")
    parser.add_argument(
        "--clear",
        action="store_true",
        help="delete existing personal records, users and movements first",
    )
    args = parser.parse_args(argv)

    setup_logging()

    db = SessionLocal()
    try:
        if args.clear:
            clear_reference_data(db)
        seed_reference_data(db)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Seeding failed")
        return 1
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
