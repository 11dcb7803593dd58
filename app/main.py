from datetime import datetime, timezone

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.db.base import get_db
from app.core.config import settings
from app.core.logging import get_logger, setup_logging
from app.routers import movements as movements_router
from app.core.errors import (
    RankingAPIException,
    ranking_exception_handler,
    http_exception_handler,
    unhandled_exception_handler,
)

setup_logging()
logger = get_logger(__name__)

app = FastAPI(
    title="Movement Ranking API",
    description=(
        "Ranks users by their personal record for an exercise movement.\n\n"
        "Movements are addressed by numeric id or exact name. "
        "Error responses carry an `error` message."
    ),
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- CORS ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Exception handlers (most specific first) ---
app.add_exception_handler(RankingAPIException, ranking_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# --- Routers ---
app.include_router(movements_router.router)


@app.get("/", tags=["health"], summary="Service banner", include_in_schema=False)
@app.get("/health", tags=["health"], summary="Health check")
def health(db: Session = Depends(get_db)):
    """
    Returns `{"status": "OK", ...}` when both the API and the database are
    reachable. Returns HTTP 503 if the DB is down.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Health check could not reach the database", exc_info=True)
        return JSONResponse(
            status_code=503,
            content={"status": "error", "db": "unreachable"},
        )
    return {
        "status": "OK",
        "message": "Movement Ranking API",
        "timestamp": datetime.now(tz=timezone.utc).isoformat(timespec="seconds"),
        "db": "ok",
        "env": settings.APP_ENV,
    }
