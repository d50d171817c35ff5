"""Tests for aggregation pipelines"""
from queries.aggregations import (
    avg_price_by_genre, author_with_most_books, group_by_decade
)


async def test_avg_price_by_genre_pipeline(books, cursor):
    cursor.to_list.return_value = [
        {"_id": "Sci-Fi", "avgPrice": 30.0, "count": 1},
        {"_id": "Fiction", "avgPrice": 15.0, "count": 2},
    ]

    result = await avg_price_by_genre(books)

    pipeline = books.aggregate.call_args[0][0]
    assert pipeline == [
        {"$group": {"_id": "$genre", "avgPrice": {"$avg": "$price"}, "count": {"$sum": 1}}},
        {"$sort": {"avgPrice": -1}},
    ]
    assert result[0]["_id"] == "Sci-Fi"


async def test_author_with_most_books_limits_to_one(books):
    await author_with_most_books(books)

    pipeline = books.aggregate.call_args[0][0]
    assert pipeline[0] == {"$group": {"_id": "$author", "count": {"$sum": 1}}}
    assert pipeline[1] == {"$sort": {"count": -1}}
    assert pipeline[-1] == {"$limit": 1}


async def test_author_with_most_books_empty_collection(books):
    assert await author_with_most_books(books) == []


async def test_group_by_decade_pipeline(books):
    await group_by_decade(books)

    pipeline = books.aggregate.call_args[0][0]
    assert pipeline[0] == {"$project": {
        "decade": {"$multiply": [{"$floor": {"$divide": ["$published_year", 10]}}, 10]}
    }}
    assert pipeline[1] == {"$group": {"_id": "$decade", "count": {"$sum": 1}}}
    assert pipeline[2] == {"$sort": {"_id": 1}}
