"""seed reference data

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19

Loads the reference users, movements and personal records. The rows are
frozen here; app.db.seed carries the same data for local seeding and tests.
Downgrade removes exactly these rows.
"""
from datetime import date
from decimal import Decimal

from alembic import op
import sqlalchemy as sa

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None

users = sa.table(
    "users",
    sa.column("id", sa.Integer),
    sa.column("name", sa.String),
)
movements = sa.table(
    "movements",
    sa.column("id", sa.Integer),
    sa.column("name", sa.String),
)
personal_records = sa.table(
    "personal_records",
    sa.column("user_id", sa.Integer),
    sa.column("movement_id", sa.Integer),
    sa.column("value", sa.Numeric(10, 2)),
    sa.column("date", sa.Date),
)

USER_ROWS = [
    {"id": 1, "name": "Joao"},
    {"id": 2, "name": "Jose"},
    {"id": 3, "name": "Paulo"},
]

MOVEMENT_ROWS = [
    {"id": 1, "name": "Deadlift"},
    {"id": 2, "name": "Back Squat"},
    {"id": 3, "name": "Bench Press"},
]

PERSONAL_RECORD_ROWS = [
    {"user_id": 1, "movement_id": 1, "value": Decimal("100.0"), "date": date(2021, 1, 1)},
    {"user_id": 1, "movement_id": 1, "value": Decimal("180.0"), "date": date(2021, 1, 2)},
    {"user_id": 1, "movement_id": 1, "value": Decimal("150.0"), "date": date(2021, 1, 3)},
    {"user_id": 1, "movement_id": 1, "value": Decimal("110.0"), "date": date(2021, 1, 4)},
    {"user_id": 2, "movement_id": 1, "value": Decimal("110.0"), "date": date(2021, 1, 4)},
    {"user_id": 2, "movement_id": 1, "value": Decimal("140.0"), "date": date(2021, 1, 5)},
    {"user_id": 2, "movement_id": 1, "value": Decimal("190.0"), "date": date(2021, 1, 6)},
    {"user_id": 3, "movement_id": 1, "value": Decimal("170.0"), "date": date(2021, 1, 1)},
    {"user_id": 3, "movement_id": 1, "value": Decimal("120.0"), "date": date(2021, 1, 2)},
    {"user_id": 3, "movement_id": 1, "value": Decimal("130.0"), "date": date(2021, 1, 3)},
    {"user_id": 1, "movement_id": 2, "value": Decimal("130.0"), "date": date(2021, 1, 3)},
    {"user_id": 2, "movement_id": 2, "value": Decimal("130.0"), "date": date(2021, 1, 3)},
    {"user_id": 3, "movement_id": 2, "value": Decimal("125.0"), "date": date(2021, 1, 3)},
    {"user_id": 1, "movement_id": 2, "value": Decimal("110.0"), "date": date(2021, 1, 5)},
    {"user_id": 1, "movement_id": 2, "value": Decimal("100.0"), "date": date(2021, 1, 1)},
    {"user_id": 2, "movement_id": 2, "value": Decimal("120.0"), "date": date(2021, 1, 1)},
    {"user_id": 3, "movement_id": 2, "value": Decimal("120.0"), "date": date(2021, 1, 1)},
]


def upgrade() -> None:
    op.bulk_insert(users, USER_ROWS)
    op.bulk_insert(movements, MOVEMENT_ROWS)
    op.bulk_insert(personal_records, PERSONAL_RECORD_ROWS)


def downgrade() -> None:
    movement_ids = [row["id"] for row in MOVEMENT_ROWS]
    user_ids = [row["id"] for row in USER_ROWS]
    op.execute(
        personal_records.delete().where(personal_records.c.movement_id.in_(movement_ids))
    )
    op.execute(movements.delete().where(movements.c.id.in_(movement_ids)))
    op.execute(users.delete().where(users.c.id.in_(user_ids)))
