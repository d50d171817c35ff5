"""
Aggregation pipelines over the books collection
"""

from typing import Any, Dict, List

from motor.motor_asyncio import AsyncIOMotorCollection

from core.utils import get_logger, format_documents

logger = get_logger(__name__)


AVG_PRICE_BY_GENRE_PIPELINE = [
    {"$group": {"_id": "$genre", "avgPrice": {"$avg": "$price"}, "count": {"$sum": 1}}},
    {"$sort": {"avgPrice": -1}},
]

# Ties on count are not broken; the first group emitted wins.
AUTHOR_WITH_MOST_BOOKS_PIPELINE = [
    {"$group": {"_id": "$author", "count": {"$sum": 1}}},
    {"$sort": {"count": -1}},
    {"$limit": 1},
]

GROUP_BY_DECADE_PIPELINE = [
    {"$project": {
        "decade": {"$multiply": [{"$floor": {"$divide": ["$published_year", 10]}}, 10]}
    }},
    {"$group": {"_id": "$decade", "count": {"$sum": 1}}},
    {"$sort": {"_id": 1}},
]


async def _aggregate(books: AsyncIOMotorCollection, pipeline: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    cursor = books.aggregate(pipeline)
    return await cursor.to_list(length=None)


async def avg_price_by_genre(books: AsyncIOMotorCollection) -> List[Dict[str, Any]]:
    """Mean price and book count per genre, most expensive genre first"""
    result = await _aggregate(books, AVG_PRICE_BY_GENRE_PIPELINE)
    logger.info(f"📊 Average price by genre:\n{format_documents(result)}")
    return result


async def author_with_most_books(books: AsyncIOMotorCollection) -> List[Dict[str, Any]]:
    """The author with the most books, as a list of at most one group"""
    result = await _aggregate(books, AUTHOR_WITH_MOST_BOOKS_PIPELINE)
    logger.info(f"🏆 Author with most books:\n{format_documents(result)}")
    return result


async def group_by_decade(books: AsyncIOMotorCollection) -> List[Dict[str, Any]]:
    """Book counts per publication decade, oldest decade first"""
    result = await _aggregate(books, GROUP_BY_DECADE_PIPELINE)
    logger.info(f"🗓️ Books grouped by decade:\n{format_documents(result)}")
    return result
