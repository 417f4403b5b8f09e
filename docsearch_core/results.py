"""DocSearch Results - Search Hit and Result Containers.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, List

from docsearch_core.facets.builder import FacetValue


@dataclass
class SearchHit:
    """One concrete occurrence of a query term in a document.

    Attributes:
        id: Unique hit identifier
        document_id: Document ID
        document_name: Document display name
        matched_text: Exact matched substring of the content
        context: Surrounding text window
        start_position: Start character offset into the content
        end_position: End character offset (exclusive)
        line_number: 1-based line of the match start
        score: Relevance score
        highlighted_snippet: Context with the match wrapped in highlight tags
    """

    id: str
    document_id: str
    document_name: str
    matched_text: str
    context: str
    start_position: int
    end_position: int
    line_number: int
    score: float
    highlighted_snippet: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "document_id": self.document_id,
            "document_name": self.document_name,
            "matched_text": self.matched_text,
            "context": self.context,
            "start_position": self.start_position,
            "end_position": self.end_position,
            "line_number": self.line_number,
            "score": self.score,
            "highlighted_snippet": self.highlighted_snippet,
        }


@dataclass
class SearchResult:
    """Search result container.

    Attributes:
        query: Original query string
        total_hits: Hit count before truncation
        hits: Sorted, truncated hits
        facets: Facet name -> values, descending by count
        suggestions: Alternate queries, only when nothing matched
        search_duration: Execution time in milliseconds
    """

    query: str
    total_hits: int = 0
    hits: List[SearchHit] = field(default_factory=list)
    facets: Dict[str, List[FacetValue]] = field(default_factory=dict)
    suggestions: List[str] = field(default_factory=list)
    search_duration: float = 0.0

    def __len__(self) -> int:
        """Return number of returned hits."""
        return len(self.hits)

    def __iter__(self) -> Iterator[SearchHit]:
        """Iterate over hits."""
        return iter(self.hits)

    def __getitem__(self, index: int) -> SearchHit:
        """Get hit by index."""
        return self.hits[index]

    def document_ids(self) -> List[str]:
        """Distinct document IDs among returned hits, in hit order."""
        return list(dict.fromkeys(hit.document_id for hit in self.hits))


@dataclass
class IndexStatistics:
    """Index statistics.

    Attributes:
        total_documents: Indexed document count
        total_terms: Distinct terms in the inverted index
        average_document_length: Mean word count per document
        estimated_size: Rough memory estimate
        last_updated: When the statistics were computed
        documents_by_format: Format -> document count
    """

    total_documents: int = 0
    total_terms: int = 0
    average_document_length: float = 0.0
    estimated_size: int = 0
    last_updated: datetime = field(default_factory=datetime.now)
    documents_by_format: Dict[str, int] = field(default_factory=dict)


__all__ = ["SearchHit", "SearchResult", "IndexStatistics"]
