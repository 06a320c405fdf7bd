"""Health check endpoints for monitoring."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException
from loguru import logger
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from letterhouse.core.dependencies import get_db_session

router = APIRouter()


@router.get("")
async def health(db: AsyncSession = Depends(get_db_session)):
    """Health check including the database connection."""
    try:
        await db.execute(text("SELECT 1"))
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        raise HTTPException(
            status_code=503,
            detail={"status": "unhealthy", "database": str(e)},
        )

    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "letterhouse",
        "database": "ok",
    }


@router.get("/live")
async def liveness_check():
    """Liveness probe."""
    return {"alive": True}
