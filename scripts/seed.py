"""Recreate the schema of the configured database and load the fixture dataset."""
import argparse
import asyncio
import time

from news_api.database import Base, async_session, dispose_engine, engine
from news_api.data.test_data import TEST_DATA
from news_api.log_config import setup_logging
from news_api.seed import seed

import news_api.models  # noqa: F401  (registers the tables on Base.metadata)


async def reseed(keep_schema: bool = False) -> None:
    start = time.perf_counter()

    if not keep_schema:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)

    async with async_session() as session:
        await seed(session, TEST_DATA)

    await dispose_engine()
    print(f"Seeding complete in {time.perf_counter() - start:.1f}s")


def main():
    parser = argparse.ArgumentParser(description="Seed the news database")
    parser.add_argument(
        "--keep-schema",
        action="store_true",
        help="Insert into the existing tables instead of dropping and recreating them",
    )
    args = parser.parse_args()
    setup_logging()
    asyncio.run(reseed(keep_schema=args.keep_schema))


if __name__ == "__main__":
    main()
