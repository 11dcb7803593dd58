"""
Movements router.

GET /api/movements/{movement_key}/ranking
"""
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from app.db.base import get_db
from app.schemas.common import ErrorResponse
from app.schemas.ranking import RankedEntryResponse, RankingResponse
from app.services.ranking import RankingResult, compute_ranking
from app.services.record_store import RecordStore, SqlRecordStore

router = APIRouter(prefix="/api/movements", tags=["movements"])


def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    return SqlRecordStore(db)


def _ranking_to_response(result: RankingResult) -> RankingResponse:
    return RankingResponse(
        movement=result.movement,
        ranking=[
            RankedEntryResponse(
                position=entry.position,
                user_name=entry.user_name,
                personal_record=float(entry.best_value),
                record_date=entry.record_date,
            )
            for entry in result.ranking
        ],
    )


@router.get(
    "/{movement_key}/ranking",
    response_model=RankingResponse,
    summary="Personal-record ranking for a movement",
    responses={
        200: {"description": "Users ordered by their best record, highest first."},
        404: {"model": ErrorResponse, "description": "Movement not found or has no records."},
        500: {"model": ErrorResponse, "description": "Record store failure."},
    },
)
def movement_ranking(
    movement_key: str = Path(
        description="Movement id or exact movement name.",
        examples=["1", "Deadlift"],
    ),
    store: RecordStore = Depends(get_record_store),
):
    """
    Rank every user with at least one personal record for the movement.

    - **personal_record** is the user's highest value.
    - **record_date** is the latest date that value was reached.
    - **position** uses competition ranking: equal records share a position
      and the following position skips ahead (1, 1, 3).
    - Ties are listed by user name.
    """
    return _ranking_to_response(compute_ranking(store, movement_key))
