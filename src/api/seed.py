"""Seed endpoints: one-shot database seeding and a read-only table status."""

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.ext.asyncio import AsyncEngine

from src.config import settings
from src.data.placeholder import PLACEHOLDER_DATASET
from src.database import get_engine
from src.middleware.rate_limit import limiter
from src.schemas.common import ErrorResponse
from src.schemas.seed import SeedResponse, SeedStatusResponse
from src.services.seeder import run_seed, table_counts

router = APIRouter(prefix="/seed", tags=["Seed"])


@router.get(
    "",
    response_model=SeedResponse,
    summary="Seed the database",
    description=(
        "Creates the users, customers, invoices and revenue tables if absent and inserts "
        "the placeholder dataset, skipping rows whose key already exists. Runs in a single "
        "transaction: on failure nothing is persisted and a `SEED_FAILED` error is returned."
    ),
    responses={
        429: {"model": ErrorResponse, "description": "Rate limit exceeded"},
        500: {"model": ErrorResponse, "description": "Seeding failed and was rolled back"},
    },
)
@limiter.limit(settings.seed_rate_limit)
async def seed(
    request: Request,
    response: Response,
    engine: AsyncEngine = Depends(get_engine),  # noqa: B008
) -> SeedResponse:
    summary = await run_seed(engine, PLACEHOLDER_DATASET)
    return SeedResponse(summary=summary)


@router.get(
    "/status",
    response_model=SeedStatusResponse,
    summary="Seeded table row counts",
)
async def seed_status(engine: AsyncEngine = Depends(get_engine)) -> SeedStatusResponse:  # noqa: B008
    """Return the row count of each seeded table; ``null`` for tables not created yet."""
    async with engine.connect() as conn:
        counts = await table_counts(conn)
    return SeedStatusResponse(**counts)
