"""
Index creation and explain() diagnostics
"""

from typing import Any, Dict, List, Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from core.constants import BOOK_INDEXES, DEFAULT_EXPLAIN_QUERY, EXPLAIN_VERBOSITY
from core.models import ExplainSummary, IndexEffect
from core.utils import get_logger, format_duration_ms

logger = get_logger(__name__)


async def create_book_indexes(books: AsyncIOMotorCollection) -> List[str]:
    """Create the title index and the compound author/published_year index"""
    names = []
    for keys in BOOK_INDEXES:
        names.append(await books.create_index(keys))
    logger.info(f"🗂️ Indexes ready on {books.name}: {', '.join(names)}")
    return names


async def explain_query(books: AsyncIOMotorCollection, query: Dict[str, Any]) -> ExplainSummary:
    """Explain a find() with executionStats verbosity and summarize it"""
    explain = await books.database.command(
        "explain",
        {"find": books.name, "filter": query},
        verbosity=EXPLAIN_VERBOSITY,
    )
    return ExplainSummary.from_explain(explain)


def _log_summary(label: str, summary: ExplainSummary) -> None:
    logger.info(
        f"🔍 explain {label}: nReturned={summary.n_returned}, "
        f"totalKeysExamined={summary.total_keys_examined}, "
        f"totalDocsExamined={summary.total_docs_examined}, "
        f"executionTime={format_duration_ms(summary.execution_time_millis)}"
    )


async def explain_index_effect(books: AsyncIOMotorCollection,
                               query: Optional[Dict[str, Any]] = None) -> IndexEffect:
    """
    Explain the same equality query before and after creating the book indexes.

    The indexes are left in place afterwards.
    """
    query = query if query is not None else dict(DEFAULT_EXPLAIN_QUERY)

    logger.info(f"Running explain() BEFORE creating indexes for {query}")
    before = await explain_query(books, query)
    _log_summary("BEFORE", before)

    logger.info("Creating index on title and compound index on {author, published_year}")
    names = await create_book_indexes(books)

    logger.info(f"Running explain() AFTER creating indexes for {query}")
    after = await explain_query(books, query)
    _log_summary("AFTER", after)

    effect = IndexEffect(before=before, after=after, index_names=names)
    if not effect.keys_within_baseline:
        logger.warning(
            f"⚠️ Indexed plan examined {after.total_keys_examined} keys, "
            f"more than the {before.total_docs_examined} documents scanned without indexes"
        )
    return effect
