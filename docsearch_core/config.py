"""DocSearch Configuration - Engine and Query Options.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from typing import Any, Union

from docsearch_core.exceptions import QueryError


class SortBy(Enum):
    """Hit ordering criteria."""

    RELEVANCE = "relevance"  # Score
    POSITION = "position"  # Start offset in content
    DOCUMENT = "document"  # Document name


class SortOrder(Enum):
    """Hit ordering direction."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


def _coerce_enum(enum_cls: type, value: Union[str, Enum], name: str) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).lower())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise QueryError(f"Invalid {name} {value!r}; expected one of: {allowed}") from None


@dataclass
class SearchOptions:
    """Per-query search options.

    Attributes:
        case_sensitive: Match letter case exactly when scanning content
        whole_word: Match whole indexed terms only
        use_regex: Treat query terms as regular expressions
        fuzzy_match: Expand terms to similar vocabulary terms
        fuzzy_threshold: Minimum similarity for fuzzy expansion (inclusive)
        max_results: Maximum hits returned after sorting
        include_context: Build context windows and snippets
        context_length: Characters of context on each side of a match
        highlight_matches: Wrap matches in highlight tags
        sort_by: Ordering criterion
        sort_order: Ordering direction
    """

    case_sensitive: bool = False
    whole_word: bool = False
    use_regex: bool = False
    fuzzy_match: bool = False
    fuzzy_threshold: float = 0.8
    max_results: int = 100
    include_context: bool = True
    context_length: int = 50
    highlight_matches: bool = True
    sort_by: SortBy = SortBy.RELEVANCE
    sort_order: SortOrder = SortOrder.DESCENDING

    def __post_init__(self):
        self.sort_by = _coerce_enum(SortBy, self.sort_by, "sort_by")
        self.sort_order = _coerce_enum(SortOrder, self.sort_order, "sort_order")

    def merged(self, **overrides: Any) -> "SearchOptions":
        """Return a validated copy with overrides applied.

        Args:
            **overrides: Option names and values; None values are ignored

        Returns:
            New SearchOptions
        """
        known = {f.name for f in fields(self)}
        unknown = set(overrides) - known
        if unknown:
            raise QueryError(f"Unknown search options: {', '.join(sorted(unknown))}")

        options = replace(self, **{k: v for k, v in overrides.items() if v is not None})
        options.validate()
        return options

    def validate(self) -> None:
        """Check option ranges.

        Raises:
            QueryError: If a value is out of range
        """
        if not 0.0 <= self.fuzzy_threshold <= 1.0:
            raise QueryError(f"fuzzy_threshold must be within [0, 1], got {self.fuzzy_threshold}")
        if self.max_results < 0:
            raise QueryError(f"max_results must be non-negative, got {self.max_results}")
        if self.context_length < 0:
            raise QueryError(f"context_length must be non-negative, got {self.context_length}")

    @property
    def descending(self) -> bool:
        return self.sort_order is SortOrder.DESCENDING


@dataclass
class SearchConfig:
    """Search engine configuration.

    Attributes:
        index_name: Name of the search index
        min_term_length: Shortest token added to the inverted index
        highlight_pre_tag: Tag inserted before a highlighted match
        highlight_post_tag: Tag inserted after a highlighted match
        suggestion_threshold: Minimum similarity for "did you mean" terms
        max_suggestions: Maximum alternate queries returned
        default_options: Options used when a search passes none
    """

    index_name: str = "default"
    min_term_length: int = 2
    highlight_pre_tag: str = "<mark>"
    highlight_post_tag: str = "</mark>"
    suggestion_threshold: float = 0.6
    max_suggestions: int = 5
    default_options: SearchOptions = field(default_factory=SearchOptions)


__all__ = ["SearchConfig", "SearchOptions", "SortBy", "SortOrder"]
