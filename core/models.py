"""
Data models for the query runner
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any


@dataclass
class Book:
    """A book document in the bookstore collection"""

    title: str
    author: str
    genre: str
    published_year: int
    price: float
    in_stock: bool = True

    # Descriptive fields carried by the sample catalog
    pages: Optional[int] = None
    publisher: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a MongoDB document, leaving out unset optional fields"""
        doc = {
            "title": self.title,
            "author": self.author,
            "genre": self.genre,
            "published_year": self.published_year,
            "price": self.price,
            "in_stock": self.in_stock,
        }
        if self.pages is not None:
            doc["pages"] = self.pages
        if self.publisher is not None:
            doc["publisher"] = self.publisher
        return doc


@dataclass
class ExplainSummary:
    """The four execution metrics reported for an explained query"""

    n_returned: int = 0
    total_keys_examined: int = 0
    total_docs_examined: int = 0
    execution_time_millis: int = 0

    # Full explain document as returned by the server
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_explain(cls, explain: Dict[str, Any]) -> 'ExplainSummary':
        """Extract metrics from an `executionStats` explain result"""
        stats = explain.get("executionStats", {})
        return cls(
            n_returned=stats.get("nReturned", 0),
            total_keys_examined=stats.get("totalKeysExamined", 0),
            total_docs_examined=stats.get("totalDocsExamined", 0),
            execution_time_millis=stats.get("executionTimeMillis", 0),
            raw=explain,
        )


@dataclass
class IndexEffect:
    """Explain summaries captured before and after index creation"""

    before: ExplainSummary
    after: ExplainSummary
    index_names: list = field(default_factory=list)

    @property
    def keys_within_baseline(self) -> bool:
        """True when the indexed plan examined no more keys than the baseline scanned documents"""
        return self.after.total_keys_examined <= self.before.total_docs_examined
