"""Seeder: create the dashboard tables and insert a fixed dataset.

Tables are handled strictly in order (users, customers, invoices, revenue).
For each one the seeder issues ``CREATE TABLE IF NOT EXISTS`` and then a
single batched ``INSERT ... ON CONFLICT (<identity>) DO NOTHING``, so running
it again with the same dataset leaves existing rows untouched.

:func:`seed_database` works on a connection the caller already opened a
transaction on; it never commits.  :func:`run_seed` owns that transaction
scope: everything commits together or nothing persists.
"""

import asyncio
import logging
import uuid
from collections.abc import Callable, Sequence
from typing import Any

from sqlalchemy import Table, func, inspect, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine
from sqlalchemy.schema import CreateTable

from src.models import Customer, Invoice, Revenue, User
from src.schemas.seed import (
    CustomerRecord,
    InvoiceRecord,
    RevenueRecord,
    SeedDataset,
    SeedSummary,
    TableSummary,
    UserRecord,
)
from src.services.passwords import hash_password

logger = logging.getLogger(__name__)

#: Seeded tables, in seeding order.
SEED_TABLES: tuple[Table, ...] = (
    User.__table__,
    Customer.__table__,
    Invoice.__table__,
    Revenue.__table__,
)

#: Namespace for the name-based UUIDs derived from record content.
SEED_NAMESPACE = uuid.UUID("6f1c2b9e-3d4a-4b8c-9e7f-0a1b2c3d4e5f")

# Dialects with an ``insert()`` that supports ``on_conflict_do_nothing``.
_INSERT_BUILDERS: dict[str, Callable[[Table], Any]] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SeedError(Exception):
    """Seeding failed while working on *table*; the original error is chained.

    For DBAPI errors the message uses the driver's error only, so statement
    parameters (password hashes included) never end up in it.
    """

    def __init__(self, table: str, cause: BaseException | str) -> None:
        self.table = table
        self.cause = cause
        detail = getattr(cause, "orig", None) or cause
        super().__init__(f"{table}: {detail}")


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


def user_id_for(record: UserRecord) -> uuid.UUID:
    """Return the supplied id, or one derived from the user's email."""
    if record.id is not None:
        return record.id
    return uuid.uuid5(SEED_NAMESPACE, f"user:{record.email}")


def invoice_id_for(record: InvoiceRecord, position: int) -> uuid.UUID:
    """Return a stable id for the invoice at *position* in the dataset.

    Re-seeding the same dataset yields the same ids, which conflict instead of
    duplicating.  The position keeps identical records apart.
    """
    key = (
        f"invoice:{position}:{record.customer_id}:"
        f"{record.amount}:{record.status}:{record.date.isoformat()}"
    )
    return uuid.uuid5(SEED_NAMESPACE, key)


# ---------------------------------------------------------------------------
# Row builders
# ---------------------------------------------------------------------------


async def _hash_passwords(users: Sequence[UserRecord]) -> list[str]:
    # One worker thread per hash; the first failure propagates.
    return list(
        await asyncio.gather(*(asyncio.to_thread(hash_password, u.password) for u in users))
    )


async def user_rows(users: Sequence[UserRecord]) -> list[dict[str, Any]]:
    """Build ``users`` rows, replacing each plaintext password with its hash."""
    hashes = await _hash_passwords(users)
    return [
        {
            "id": user_id_for(user),
            "name": user.name,
            "email": user.email,
            "password_hash": password_hash,
        }
        for user, password_hash in zip(users, hashes, strict=True)
    ]


def customer_rows(customers: Sequence[CustomerRecord]) -> list[dict[str, Any]]:
    return [c.model_dump() for c in customers]


def invoice_rows(invoices: Sequence[InvoiceRecord]) -> list[dict[str, Any]]:
    return [
        {"id": invoice_id_for(inv, position), **inv.model_dump()}
        for position, inv in enumerate(invoices)
    ]


def revenue_rows(revenue: Sequence[RevenueRecord]) -> list[dict[str, Any]]:
    return [r.model_dump() for r in revenue]


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


async def count_rows(conn: AsyncConnection, table: Table) -> int:
    result = await conn.execute(select(func.count()).select_from(table))
    return result.scalar_one()


async def table_counts(conn: AsyncConnection) -> dict[str, int | None]:
    """Return the row count of each seeded table, ``None`` where it does not exist yet."""
    existing = await conn.run_sync(lambda sync_conn: set(inspect(sync_conn).get_table_names()))
    counts: dict[str, int | None] = {}
    for table in SEED_TABLES:
        counts[table.name] = await count_rows(conn, table) if table.name in existing else None
    return counts


async def seed_table(
    conn: AsyncConnection,
    table: Table,
    identity: str,
    rows: list[dict[str, Any]],
) -> TableSummary:
    """Create *table* if absent and insert *rows*, ignoring conflicts on *identity*.

    ``inserted`` is the change in the table's row count across the insert,
    measured inside the caller's transaction.
    """
    build_insert = _INSERT_BUILDERS.get(conn.dialect.name)
    if build_insert is None:
        raise SeedError(table.name, f"unsupported database dialect {conn.dialect.name!r}")

    await conn.execute(CreateTable(table, if_not_exists=True))
    if not rows:
        return TableSummary(attempted=0, inserted=0, skipped=0)

    before = await count_rows(conn, table)
    stmt = build_insert(table).on_conflict_do_nothing(index_elements=[identity])
    await conn.execute(stmt, rows)
    inserted = await count_rows(conn, table) - before

    return TableSummary(attempted=len(rows), inserted=inserted, skipped=len(rows) - inserted)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------


async def seed_database(conn: AsyncConnection, dataset: SeedDataset) -> SeedSummary:
    """Seed all four tables on *conn*, in order.  Raises :class:`SeedError` on failure."""
    try:
        users = await user_rows(dataset.users)
    except Exception as exc:  # noqa: BLE001
        raise SeedError("users", exc) from exc

    steps: list[tuple[str, Table, str, list[dict[str, Any]]]] = [
        ("users", User.__table__, "id", users),
        ("customers", Customer.__table__, "id", customer_rows(dataset.customers)),
        ("invoices", Invoice.__table__, "id", invoice_rows(dataset.invoices)),
        ("revenue", Revenue.__table__, "month", revenue_rows(dataset.revenue)),
    ]
    summaries: dict[str, TableSummary] = {}
    for name, table, identity, rows in steps:
        try:
            summary = await seed_table(conn, table, identity, rows)
        except SQLAlchemyError as exc:
            raise SeedError(name, exc) from exc

        logger.info(
            "Seeded %s: %d attempted, %d inserted, %d skipped",
            name,
            summary.attempted,
            summary.inserted,
            summary.skipped,
        )
        summaries[name] = summary

    return SeedSummary(**summaries)


async def run_seed(engine: AsyncEngine, dataset: SeedDataset) -> SeedSummary:
    """Seed *dataset* inside one transaction on *engine*.

    The transaction commits when every table succeeds and rolls back on any
    error.  Connection and commit failures are reported as :class:`SeedError`
    with ``table="transaction"``.
    """
    try:
        async with engine.begin() as conn:
            return await seed_database(conn, dataset)
    except (SQLAlchemyError, OSError) as exc:
        raise SeedError("transaction", exc) from exc
