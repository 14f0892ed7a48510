"""Master seed script - Seeds content, achievements and library resources for local development."""

import argparse
import asyncio

import asyncpg

from seedgate.core.config import get_settings
from seedgate.services.achievements import seed_default_achievements
from seedgate.services.resources import seed_sample_resources
from seedgate.services.seeding import seed_database


async def run_all_seeds(skip_content: bool = False) -> None:
    """Run the content, achievement and library resource seeds in order."""
    settings = get_settings()
    conn = await asyncpg.connect(dsn=settings.DATABASE_URL)

    print("\n" + "=" * 70)
    print(" " * 22 + "SEEDGATE - MASTER SEED SCRIPT")
    print("=" * 70)

    try:
        if skip_content:
            print("\n[1/3] Skipping curriculum content")
        else:
            print("\n[1/3] Seeding curriculum content...")
            print("-" * 70)
            counts = await seed_database(conn)
            for name, count in counts.items():
                print(f"  ✓ {count} {name}")

        print("\n[2/3] Seeding default achievements...")
        print("-" * 70)
        result = await seed_default_achievements(conn)
        print(f"  ✓ {len(result['inserted'])} new achievements ({result['total']} total)")

        print("\n[3/3] Seeding sample library resources...")
        print("-" * 70)
        result = await seed_sample_resources(conn)
        print(f"  ✓ {len(result['inserted'])} new resources ({result['total']} total)")
    finally:
        await conn.close()

    print("\n" + "=" * 70)
    print(" " * 25 + "SEEDING COMPLETE!")
    print("=" * 70 + "\n")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the learning platform database")
    parser.add_argument(
        "--skip-content",
        action="store_true",
        help="Skip curriculum content (content seeding is not idempotent)",
    )
    args = parser.parse_args()
    asyncio.run(run_all_seeds(skip_content=args.skip_content))
