#!/usr/bin/env python3
"""
Bookstore Query Runner
Main Entry Point
"""

import sys
import asyncio
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from config import RunnerSettings, LOG_LEVEL, LOG_DIR, LOG_TO_FILE
from database.mongodb import MongoDB, db as default_db
from core.utils import setup_logging, get_logger
from queries import (
    find_by_genre, find_published_after, find_by_author,
    update_price, delete_by_title,
    in_stock_after, sorted_by_price, get_page,
    avg_price_by_genre, author_with_most_books, group_by_decade,
    explain_index_effect,
)

logger = get_logger(__name__)


async def run_catalog(books: AsyncIOMotorCollection, settings: RunnerSettings) -> None:
    """Run every query in order; the first failure stops the rest"""

    # ---- CRUD ----
    await find_by_genre(books, settings.genre)
    await find_published_after(books, settings.after_year)
    await find_by_author(books, settings.author)
    await update_price(books, settings.title, settings.new_price)
    if settings.delete_title:
        await delete_by_title(books, settings.delete_title)
    else:
        logger.info("⏭️ Skipping delete_by_title (DELETE_TITLE not set)")

    # ---- Advanced queries ----
    await in_stock_after(books, settings.in_stock_after_year)
    await sorted_by_price(books, "asc")
    await sorted_by_price(books, "desc")
    await get_page(books, 1, settings.page_size)
    await get_page(books, 2, settings.page_size)

    # ---- Aggregations ----
    await avg_price_by_genre(books)
    await author_with_most_books(books)
    await group_by_decade(books)

    # ---- Indexing ----
    await explain_index_effect(books, {"title": settings.title})


async def run(settings: Optional[RunnerSettings] = None,
              database: Optional[MongoDB] = None) -> int:
    """Connect, run the catalog and always disconnect. Returns an exit status."""
    settings = settings or RunnerSettings.from_config()
    database = database or default_db

    try:
        # Connection is released on every path, including a failed catalog
        async with database:
            await run_catalog(database.books, settings)
        logger.info("✅ Query catalog finished")
        return 0
    except Exception as e:
        logger.error(f"💥 Query run failed: {e}", exc_info=True)
        return 1


def main():
    """Main entry point"""
    setup_logging(LOG_LEVEL, LOG_DIR if LOG_TO_FILE else None)

    status = 1
    try:
        status = asyncio.run(run())
    except KeyboardInterrupt:
        logger.info("👋 Received keyboard interrupt")
        status = 130
    finally:
        logger.info("🏁 Query runner ended")
    sys.exit(status)


if __name__ == "__main__":
    main()
