#!/usr/bin/env python3
"""
Seed the books collection with a sample catalog
"""

import sys
import asyncio
from typing import Iterable

from motor.motor_asyncio import AsyncIOMotorCollection

from config import LOG_LEVEL
from core.models import Book
from core.utils import setup_logging, get_logger
from database.mongodb import db

logger = get_logger(__name__)


SAMPLE_BOOKS = [
    Book("To Kill a Mockingbird", "Harper Lee", "Fiction", 1960, 12.99, True, 336, "J. B. Lippincott & Co."),
    Book("1984", "George Orwell", "Dystopian", 1949, 10.99, True, 328, "Secker & Warburg"),
    Book("The Great Gatsby", "F. Scott Fitzgerald", "Fiction", 1925, 9.99, True, 180, "Charles Scribner's Sons"),
    Book("Brave New World", "Aldous Huxley", "Dystopian", 1932, 11.50, False, 311, "Chatto & Windus"),
    Book("The Hobbit", "J.R.R. Tolkien", "Fantasy", 1937, 14.99, True, 310, "George Allen & Unwin"),
    Book("The Catcher in the Rye", "J.D. Salinger", "Fiction", 1951, 8.99, True, 224, "Little, Brown and Company"),
    Book("Pride and Prejudice", "Jane Austen", "Romance", 1813, 7.99, True, 432, "T. Egerton, Whitehall"),
    Book("The Lord of the Rings", "J.R.R. Tolkien", "Fantasy", 1954, 19.99, True, 1178, "Allen & Unwin"),
    Book("Animal Farm", "George Orwell", "Political Satire", 1945, 8.50, False, 112, "Secker & Warburg"),
    Book("The Alchemist", "Paulo Coelho", "Fiction", 1988, 10.99, True, 197, "HarperOne"),
    Book("Moby Dick", "Herman Melville", "Adventure", 1851, 12.50, False, 635, "Harper & Brothers"),
    Book("Wuthering Heights", "Emily Brontë", "Gothic Fiction", 1847, 9.99, True, 342, "Thomas Cautley Newby"),
    Book("The Midnight Library", "Matt Haig", "Fiction", 2020, 15.99, True, 304, "Canongate Books"),
    Book("Project Hail Mary", "Andy Weir", "Science Fiction", 2021, 18.99, True, 496, "Ballantine Books"),
]


async def seed_books(books: AsyncIOMotorCollection, catalog: Iterable[Book] = SAMPLE_BOOKS,
                     drop_existing: bool = True) -> int:
    """Insert the catalog, optionally clearing the collection first. Returns inserted count."""
    if drop_existing:
        removed = await books.delete_many({})
        logger.info(f"🧹 Removed {removed.deleted_count} existing books")

    documents = [book.to_dict() for book in catalog]
    if not documents:
        logger.warning("No books to insert")
        return 0

    result = await books.insert_many(documents)
    logger.info(f"🌱 Inserted {len(result.inserted_ids)} books into {books.name}")
    return len(result.inserted_ids)


async def run() -> int:
    try:
        async with db:
            await seed_books(db.books)
        return 0
    except Exception as e:
        logger.error(f"💥 Seeding failed: {e}", exc_info=True)
        return 1


def main():
    """Main entry point"""
    setup_logging(LOG_LEVEL, None)
    sys.exit(asyncio.run(run()))


if __name__ == "__main__":
    main()
