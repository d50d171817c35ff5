"""
Advanced queries: projection, sorting and pagination
"""

from typing import Any, Dict, List, Union

from motor.motor_asyncio import AsyncIOMotorCollection

from core.constants import (
    SortOrder, IN_STOCK_PROJECTION, PRICE_PROJECTION, PAGE_PROJECTION
)
from core.utils import get_logger, format_documents

logger = get_logger(__name__)


async def in_stock_after(books: AsyncIOMotorCollection, year: int) -> List[Dict[str, Any]]:
    """In-stock books published after `year`, projected to title, author and price"""
    cursor = books.find(
        {"in_stock": True, "published_year": {"$gt": year}},
        IN_STOCK_PROJECTION
    )
    docs = await cursor.to_list(length=None)
    logger.info(f"📦 In-stock books after {year} ({len(docs)}):\n{format_documents(docs)}")
    return docs


async def sorted_by_price(books: AsyncIOMotorCollection,
                          order: Union[str, SortOrder] = SortOrder.ASC) -> List[Dict[str, Any]]:
    """
    All books projected to title and price, sorted by price.

    `order` is "asc" or "desc". Books with equal prices come back in
    whatever order the server produces.
    """
    order = SortOrder(order)
    cursor = books.find({}, PRICE_PROJECTION).sort("price", order.direction)
    docs = await cursor.to_list(length=None)
    logger.info(f"🔢 Books sorted by price ({order.value}):\n{format_documents(docs)}")
    return docs


def page_bounds(page: int, page_size: int) -> int:
    """Validate 1-based paging arguments and return the number of documents to skip"""
    for name, value in (("page", page), ("page_size", page_size)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size <= 0:
        raise ValueError(f"page_size must be > 0, got {page_size}")
    return (page - 1) * page_size


async def get_page(books: AsyncIOMotorCollection, page: int = 1,
                   page_size: int = 5) -> List[Dict[str, Any]]:
    """Return one page (1-based) of books projected to title and author"""
    skip = page_bounds(page, page_size)
    cursor = books.find({}, PAGE_PROJECTION).skip(skip).limit(page_size)
    docs = await cursor.to_list(length=None)
    logger.info(f"📄 Page {page} (size {page_size}):\n{format_documents(docs)}")
    return docs
