"""Seed script: populate the dashboard database with the placeholder dataset.

Run as:
    python -m seed

Uses DATABASE_URL_DIRECT when set, otherwise DATABASE_URL (environment or
.env file).  Exits with status 1 if seeding fails; nothing is persisted then.
"""

import asyncio
import sys

from src.data.placeholder import PLACEHOLDER_DATASET
from src.database import build_engine
from src.schemas.seed import SeedDataset, SeedSummary
from src.services.seeder import SeedError, run_seed


def format_summary(summary: SeedSummary) -> list[str]:
    """Return one ``✓`` line per table, in seeding order."""
    lines = []
    for name, table in summary:
        lines.append(
            f"  ✓ {name}: {table.inserted} inserted, {table.skipped} skipped "
            f"({table.attempted} attempted)"
        )
    return lines


async def main(dataset: SeedDataset = PLACEHOLDER_DATASET) -> int:
    print("Invoice Dashboard Seed Script")
    print("=" * 50)

    engine = build_engine()
    try:
        summary = await run_seed(engine, dataset)
    except SeedError as exc:
        print(f"\n✗ Seed failed, rolled back: {exc}", file=sys.stderr)
        return 1
    finally:
        await engine.dispose()

    for line in format_summary(summary):
        print(line)
    print("\n✓ Seed complete!")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
