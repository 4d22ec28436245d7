"""Health check endpoint, always HTTP 200 so it can back a liveness probe."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from src.config import settings
from src.database import get_engine
from src.schemas.health import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health(engine: AsyncEngine = Depends(get_engine)) -> HealthResponse:  # noqa: B008
    """Return application health.

    Runs ``SELECT 1`` to check database connectivity; an unreachable database
    is reported as ``degraded`` in the body rather than as an error status.
    """
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        db_status = "connected"
        app_status = "ok"
    except Exception:
        logger.warning("Database health check failed", exc_info=True)
        db_status = "disconnected"
        app_status = "degraded"

    return HealthResponse(
        status=app_status,
        database=db_status,
        version=settings.version,
        built_by=settings.app_name,
    )
