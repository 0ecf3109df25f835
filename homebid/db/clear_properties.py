"""Remove every listing together with its bids, visits and favorites.

    python -m homebid.db.clear_properties
"""
import asyncio

from loguru import logger
from tortoise.transactions import in_transaction

from homebid.core.database import DatabaseManager
from homebid.models import Bid, Favorite, Property, Visit


async def clear_properties() -> int:
    # Dependents first: SQLite does not enforce ON DELETE CASCADE unless told to
    async with in_transaction() as connection:
        for model in (Favorite, Visit, Bid):
            await model.all().using_db(connection).delete()
        deleted = await Property.all().using_db(connection).delete()

    logger.info(f"Properties table cleared: {deleted} rows removed")
    return deleted


async def main():
    await DatabaseManager.init()
    try:
        await clear_properties()
    finally:
        await DatabaseManager.close()

if __name__ == "__main__":
    asyncio.run(main())
