"""DocSearch Suggestions - "Did You Mean" Query Rewrites.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from typing import List

from docsearch_core.index.inverted import InvertedIndex
from docsearch_core.ranking.similarity import similarity

_TOKEN_PATTERN = re.compile(r"\S+")


class SuggestionGenerator:
    """Proposes alternate queries from similar vocabulary terms.

    Each whitespace token of the query is compared against the sorted
    vocabulary. Every term close enough to a token, but not identical to
    it, yields the query with that token replaced.
    """

    def __init__(
        self,
        index: InvertedIndex,
        threshold: float = 0.6,
        max_suggestions: int = 5,
    ):
        self.index = index
        self.threshold = threshold
        self.max_suggestions = max_suggestions

    def suggest(self, query: str) -> List[str]:
        """Generate alternate query strings.

        Args:
            query: Original query string

        Returns:
            Distinct rewritten queries, at most max_suggestions
        """
        suggestions: List[str] = []
        vocabulary = self.index.vocabulary()

        for token in query.lower().split():
            for term in vocabulary:
                if term == token or similarity(token, term) < self.threshold:
                    continue
                suggestions.append(self.rewrite(query, token, term))

        return list(dict.fromkeys(suggestions))[:self.max_suggestions]

    @staticmethod
    def rewrite(query: str, token: str, replacement: str) -> str:
        """Replace every token equal to ``token`` (ignoring case)."""
        return _TOKEN_PATTERN.sub(
            lambda m: replacement if m.group(0).lower() == token else m.group(0),
            query,
        )


__all__ = ["SuggestionGenerator"]
