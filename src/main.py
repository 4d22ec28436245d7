from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException

from src.api.router import api_router
from src.config import settings
from src.database import engine
from src.middleware.access_log import AccessLogMiddleware
from src.middleware.error_handler import (
    http_exception_handler,
    seed_error_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from src.middleware.rate_limit import limiter, rate_limit_exceeded_handler
from src.middleware.request_id import RequestIdMiddleware
from src.services.seeder import SeedError

_OPENAPI_TAGS = [
    {"name": "Health", "description": "Health check endpoints"},
    {"name": "Seed", "description": "Database seeding with the placeholder dataset"},
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    # Startup: verify database connection
    async with engine.connect() as conn:
        await conn.run_sync(lambda _: None)
    yield
    # Shutdown: dispose all connections
    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    description="Seeds the invoice dashboard database with a fixed demo dataset",
    version=settings.version,
    debug=settings.debug,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_tags=_OPENAPI_TAGS,
)

# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------

app.add_exception_handler(HTTPException, http_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(SeedError, seed_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, unhandled_exception_handler)

# ---------------------------------------------------------------------------
# Rate limiter
# ---------------------------------------------------------------------------

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)  # type: ignore[arg-type]

# ---------------------------------------------------------------------------
# Middleware (Starlette LIFO: last add_middleware call runs outermost)
# ---------------------------------------------------------------------------

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Reads REQUEST_ID_CTX, so it must run inside RequestIdMiddleware.
app.add_middleware(AccessLogMiddleware)

app.add_middleware(RequestIdMiddleware)

app.include_router(api_router)
