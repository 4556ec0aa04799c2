"""Health check endpoints for load balancers and monitoring."""

import os

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.exercise import Exercise

router = APIRouter()


@router.get("")
async def health():
    """Liveness check. Includes built_at if BACKEND_BUILT_AT is set."""
    payload: dict = {"status": "ok"}
    built_at = os.environ.get("BACKEND_BUILT_AT")
    if built_at:
        payload["built_at"] = built_at
    return payload


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Readiness: DB reachable and the exercise catalog is not empty."""
    try:
        count = (await db.execute(select(func.count(Exercise.id)))).scalar_one()
    except (SQLAlchemyError, OSError) as e:
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": str(e)},
        )
    if not count:
        return JSONResponse(
            status_code=503,
            content={"status": "error", "database": "connected", "exercises": 0},
        )
    return {"status": "ok", "database": "connected", "exercises": count}
