import ssl as _ssl
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.config import settings

_ASYNCPG_PREFIX = "postgresql+asyncpg://"


def normalize_url(url: str) -> str:
    """Point bare ``postgres://`` / ``postgresql://`` URLs at the asyncpg driver."""
    for prefix in ("postgresql://", "postgres://"):
        if url.startswith(prefix):
            return _ASYNCPG_PREFIX + url[len(prefix) :]
    return url


def engine_options(url: str, ssl_mode: str = "require") -> tuple[str, dict]:
    """Return the cleaned URL and ``connect_args`` for *url*.

    asyncpg does not accept ``sslmode`` as a query parameter, it expects
    ``ssl`` via ``connect_args``.  When the URL carries ``sslmode`` it wins
    over *ssl_mode*.  Prepared-statement caches are switched off so the
    connection stays usable behind PgBouncer in transaction mode.

    Non-asyncpg URLs are returned untouched with empty ``connect_args``.
    """
    url = normalize_url(url)
    if not url.startswith(_ASYNCPG_PREFIX):
        return url, {}

    parts = urlsplit(url)
    qs = parse_qs(parts.query)
    if "sslmode" in qs:
        ssl_mode = qs.pop("sslmode")[0]
        url = urlunsplit(parts._replace(query=urlencode(qs, doseq=True)))

    connect_args: dict = {
        "statement_cache_size": 0,
        "prepared_statement_cache_size": 0,
    }
    if ssl_mode in ("require", "verify-ca", "verify-full"):
        connect_args["ssl"] = _ssl.create_default_context()

    return url, connect_args


def build_engine(url: str | None = None, **kwargs) -> AsyncEngine:
    """Create an ``AsyncEngine`` for *url* (defaults to the seeding URL from settings)."""
    _url, _connect_args = engine_options(url or settings.seed_database_url, settings.database_ssl)
    if _url.startswith(_ASYNCPG_PREFIX):
        kwargs.setdefault("pool_size", 5)
        kwargs.setdefault("max_overflow", 10)
    return create_async_engine(
        _url,
        pool_pre_ping=True,
        connect_args=_connect_args,
        **kwargs,
    )


engine = build_engine()


def get_engine() -> AsyncEngine:
    """FastAPI dependency returning the process-wide engine.

    Callers open their own transaction scope with ``async with engine.begin()``.
    """
    return engine
