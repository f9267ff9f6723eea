"""
Health check API route
"""

from fastapi import APIRouter, HTTPException
from database.connection import get_db_pool
from utils.error_handling import utc_timestamp

router = APIRouter()

@router.get("/health")
async def health_check():
    """Report service health, including database connectivity"""
    db_pool = get_db_pool()
    if not db_pool:
        raise HTTPException(status_code=503, detail="Health check failed: database not initialized")

    try:
        async with db_pool.acquire() as conn:
            await conn.fetchval("SELECT 1")
    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {type(e).__name__}") from e

    return {
        "status": "healthy",
        "timestamp": utc_timestamp(),
        "database": "connected"
    }
