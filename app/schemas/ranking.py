"""
Ranking schemas.

GET /api/movements/{movement_key}/ranking → RankingResponse
"""
from datetime import date
from pydantic import BaseModel, Field


class RankedEntryResponse(BaseModel):
    """One user's best record and competition position."""

    position: int = Field(
        description="Competition rank: tied records share a position, the next one skips ahead.",
        examples=[1],
    )
    user_name: str
    personal_record: float = Field(
        description="Highest value the user recorded for the movement.",
        examples=[190.0],
    )
    record_date: date = Field(
        description="Most recent date on which the personal record was reached.",
    )


class RankingResponse(BaseModel):
    """Ranking for a single movement, best record first."""
    movement: str
    ranking: list[RankedEntryResponse]
