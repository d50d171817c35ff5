"""
Basic CRUD operations on the books collection
"""

from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.results import DeleteResult, UpdateResult

from core.utils import get_logger, format_documents

logger = get_logger(__name__)


async def _find_all(books: AsyncIOMotorCollection, query: Dict[str, Any]) -> List[Dict[str, Any]]:
    return await books.find(query).to_list(length=None)


async def find_by_genre(books: AsyncIOMotorCollection, genre: str) -> List[Dict[str, Any]]:
    """Find all books in a genre"""
    docs = await _find_all(books, {"genre": genre})
    logger.info(f"📚 Books in genre \"{genre}\" ({len(docs)}):\n{format_documents(docs)}")
    return docs


async def find_published_after(books: AsyncIOMotorCollection, year: int) -> List[Dict[str, Any]]:
    """Find books published strictly after `year`"""
    docs = await _find_all(books, {"published_year": {"$gt": year}})
    logger.info(f"📅 Books published after {year} ({len(docs)}):\n{format_documents(docs)}")
    return docs


async def find_by_author(books: AsyncIOMotorCollection, author: str) -> List[Dict[str, Any]]:
    """Find books by an author"""
    docs = await _find_all(books, {"author": author})
    logger.info(f"✍️ Books by \"{author}\" ({len(docs)}):\n{format_documents(docs)}")
    return docs


async def update_price(books: AsyncIOMotorCollection, title: str, new_price: float) -> UpdateResult:
    """
    Set the price of the book with the given title.

    At most one document is touched. A missing title is reported as
    matched=0, modified=0 rather than raised.
    """
    result = await books.update_one({"title": title}, {"$set": {"price": new_price}})
    logger.info(
        f"💲 Updated price for \"{title}\": "
        f"matched={result.matched_count}, modified={result.modified_count}"
    )
    return result


async def delete_by_title(books: AsyncIOMotorCollection, title: str) -> DeleteResult:
    """Delete at most one book by title; deleted_count is 0 when absent"""
    result = await books.delete_one({"title": title})
    logger.info(f"🗑️ Deleted \"{title}\": deleted_count={result.deleted_count}")
    return result
