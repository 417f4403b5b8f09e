"""DocSearch Sorter - Hit Ranking and Pagination.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, List

from docsearch_core.config import SortBy, SortOrder

if TYPE_CHECKING:
    from docsearch_core.results import SearchHit

_SORT_KEYS: Dict[SortBy, Callable[["SearchHit"], Any]] = {
    SortBy.RELEVANCE: lambda hit: hit.score,
    SortBy.POSITION: lambda hit: hit.start_position,
    SortBy.DOCUMENT: lambda hit: hit.document_name,
}


def sort_hits(
    hits: List[SearchHit],
    sort_by: SortBy = SortBy.RELEVANCE,
    sort_order: SortOrder = SortOrder.DESCENDING,
) -> List[SearchHit]:
    """Sort hits by the requested criterion.

    Equal keys fall back to document id ascending, then start position
    ascending, in either direction. Both sorts are stable and
    ``reverse=True`` keeps equal elements in their prior order.

    Args:
        hits: Hits to sort
        sort_by: Ordering criterion
        sort_order: Ordering direction

    Returns:
        New sorted list
    """
    ordered = sorted(hits, key=lambda hit: (hit.document_id, hit.start_position))
    ordered.sort(
        key=_SORT_KEYS[sort_by],
        reverse=sort_order is SortOrder.DESCENDING,
    )
    return ordered


def paginate(hits: List[SearchHit], max_results: int) -> List[SearchHit]:
    """Truncate a sorted hit list to the result cap."""
    return hits[:max(0, max_results)]


__all__ = ["sort_hits", "paginate"]
