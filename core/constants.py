"""
Constants and enums used throughout the query runner
"""

from enum import Enum
from typing import Dict, List, Tuple

from pymongo import ASCENDING, DESCENDING


class SortOrder(Enum):
    """Price sort direction"""
    ASC = "asc"
    DESC = "desc"

    @property
    def direction(self) -> int:
        return ASCENDING if self is SortOrder.ASC else DESCENDING


# Projections
IN_STOCK_PROJECTION: Dict[str, int] = {"title": 1, "author": 1, "price": 1, "_id": 0}
PRICE_PROJECTION: Dict[str, int] = {"title": 1, "price": 1, "_id": 0}
PAGE_PROJECTION: Dict[str, int] = {"title": 1, "author": 1, "_id": 0}

# Index definitions created by the explain demonstration
TITLE_INDEX: List[Tuple[str, int]] = [("title", ASCENDING)]
AUTHOR_YEAR_INDEX: List[Tuple[str, int]] = [("author", ASCENDING), ("published_year", DESCENDING)]
BOOK_INDEXES: List[List[Tuple[str, int]]] = [TITLE_INDEX, AUTHOR_YEAR_INDEX]

DEFAULT_EXPLAIN_QUERY: Dict[str, str] = {"title": "1984"}
EXPLAIN_VERBOSITY = "executionStats"
