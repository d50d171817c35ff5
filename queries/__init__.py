"""
Query catalog for the books collection

Every operation takes the collection handle as its first argument.
"""

from .crud import (
    find_by_genre, find_published_after, find_by_author,
    update_price, delete_by_title
)
from .advanced import in_stock_after, sorted_by_price, get_page
from .aggregations import avg_price_by_genre, author_with_most_books, group_by_decade
from .indexing import create_book_indexes, explain_query, explain_index_effect

__all__ = [
    "find_by_genre", "find_published_after", "find_by_author",
    "update_price", "delete_by_title",
    "in_stock_after", "sorted_by_price", "get_page",
    "avg_price_by_genre", "author_with_most_books", "group_by_decade",
    "create_book_indexes", "explain_query", "explain_index_effect",
]
