"""
Ranking engine: best personal record per user, competition-ranked.

Pipeline
--------
1. Resolve the movement key (numeric id or exact name) through the store.
2. Reduce observations to one row per user:
     best_value  = max(value)
     record_date = latest date among observations that reached best_value
3. Order by best_value desc, then user name asc, then user id asc, and
   assign competition positions ("1224" ranking): tied values share a
   position and the next distinct value skips ahead by the tie size.

An unknown movement and a movement with no records are both reported as
MovementNotFoundError("Movement not found"); only the log tells them apart.

Public API
----------
compute_ranking(store, movement_key) -> RankingResult
reduce_best_records(observations)    -> list[BestRecord]
assign_positions(records)            -> list[RankedEntry]
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable

from app.core.errors import MovementNotFoundError
from app.core.logging import get_logger
from app.services.record_store import Observation, RecordStore

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Result types (plain dataclasses, no ORM)
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BestRecord:
    user_id: int
    user_name: str
    best_value: Decimal
    record_date: date


@dataclass(frozen=True)
class RankedEntry:
    position: int
    user_name: str
    best_value: Decimal
    record_date: date


@dataclass(frozen=True)
class RankingResult:
    movement: str
    ranking: list[RankedEntry]


# ---------------------------------------------------------------------------
# Stage 1: group and reduce
# ---------------------------------------------------------------------------

def reduce_best_records(observations: Iterable[Observation]) -> list[BestRecord]:
    """Collapse observations to each user's best value and its latest date."""
    best: dict[int, BestRecord] = {}
    for obs in observations:
        current = best.get(obs.user_id)
        if (
            current is None
            or obs.value > current.best_value
            or (obs.value == current.best_value and obs.date > current.record_date)
        ):
            best[obs.user_id] = BestRecord(
                user_id=obs.user_id,
                user_name=obs.user_name,
                best_value=obs.value,
                record_date=obs.date,
            )
    return list(best.values())


# ---------------------------------------------------------------------------
# Stage 2: sort and rank
# ---------------------------------------------------------------------------

def _sort_key(record: BestRecord):
    return (-record.best_value, record.user_name, record.user_id)


def assign_positions(records: Iterable[BestRecord]) -> list[RankedEntry]:
    """
    Competition ranking: a row's position is 1 + the number of rows with a
    strictly greater best_value.
    """
    ordered = sorted(records, key=_sort_key)
    ranked: list[RankedEntry] = []
    position = 0
    previous: Decimal | None = None
    for index, record in enumerate(ordered, start=1):
        if previous is None or record.best_value != previous:
            position = index
            previous = record.best_value
        ranked.append(RankedEntry(
            position=position,
            user_name=record.user_name,
            best_value=record.best_value,
            record_date=record.record_date,
        ))
    return ranked


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def compute_ranking(store: RecordStore, movement_key: str) -> RankingResult:
    movement = store.find_movement(movement_key)
    if movement is None:
        logger.info(
            "Ranking requested for unknown movement",
            extra={"movement_key": movement_key},
        )
        raise MovementNotFoundError(movement_key)

    observations = store.list_observations(movement.id)
    if not observations:
        logger.info(
            "Ranking requested for movement without records",
            extra={"movement_key": movement_key, "movement_id": movement.id},
        )
        raise MovementNotFoundError(movement_key)

    ranking = assign_positions(reduce_best_records(observations))
    return RankingResult(movement=movement.name, ranking=ranking)
