"""DocSearch Hit Locator - Occurrence Finding, Scoring and Highlighting.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
import uuid
from typing import List, Optional, Tuple

from docsearch_core.config import SearchOptions
from docsearch_core.index.document import DocumentStore, IndexedDocument
from docsearch_core.index.inverted import InvertedIndex
from docsearch_core.query.matcher import PlanStep
from docsearch_core.ranking.scorer import Scorer, ScoringContext, TFIDFScorer
from docsearch_core.results import SearchHit

ELLIPSIS = "..."


class HitLocator:
    """Locates every occurrence of each clause in a document.

    Each non-empty, non-overlapping pattern match becomes one SearchHit
    carrying its context window, line number, TF-IDF score and
    highlighted snippet.
    """

    def __init__(
        self,
        store: DocumentStore,
        index: InvertedIndex,
        scorer: Optional[Scorer] = None,
        pre_tag: str = "<mark>",
        post_tag: str = "</mark>",
    ):
        self.store = store
        self.index = index
        self.scorer = scorer or TFIDFScorer()
        self.pre_tag = pre_tag
        self.post_tag = post_tag

    def locate(
        self,
        document: IndexedDocument,
        steps: List[PlanStep],
        options: SearchOptions,
    ) -> List[SearchHit]:
        """Find hits for all non-excluded clauses in one document.

        Args:
            document: Document to scan
            steps: Prepared clauses
            options: Active search options

        Returns:
            Hits in clause order, then position order
        """
        hits: List[SearchHit] = []
        content = document.content

        for step in steps:
            if step.clause.excluded or step.pattern is None:
                continue

            for match in step.pattern.finditer(content):
                start, end = match.span()
                if start == end:
                    continue

                matched = content[start:end]
                term_key = matched.lower() if step.fuzzy else step.clause.term.lower()

                context = ""
                snippet = ""
                if options.include_context:
                    context = self.context_window(content, start, end, options.context_length)
                    snippet = self.highlight(context, matched) if options.highlight_matches else context

                hits.append(SearchHit(
                    id=uuid.uuid4().hex,
                    document_id=document.id,
                    document_name=document.name,
                    matched_text=matched,
                    context=context,
                    start_position=start,
                    end_position=end,
                    line_number=self.line_number(content, start),
                    score=self.score(document, term_key),
                    highlighted_snippet=snippet,
                ))

        return hits

    def score(self, document: IndexedDocument, term_key: str) -> float:
        """Score a hit for a term within a document.

        The term frequency is the document's own count for the term, or 1
        when the term is not a single indexed term.
        """
        if document.word_count <= 0:
            return 0.0

        context = ScoringContext(
            total_docs=self.store.count(),
            doc_freq=self.index.document_frequency(term_key),
            term_freq=document.term_frequency(term_key, 1),
            field_length=document.word_count,
        )
        return self.scorer.score(context)

    @staticmethod
    def context_window(content: str, start: int, end: int, length: int) -> str:
        """Text around ``content[start:end]``, marked where truncated."""
        window_start, window_end = _window_bounds(len(content), start, end, length)
        context = content[window_start:window_end]
        if window_start > 0:
            context = ELLIPSIS + context
        if window_end < len(content):
            context = context + ELLIPSIS
        return context

    @staticmethod
    def line_number(content: str, start: int) -> int:
        """1-based line of the character at ``start``."""
        return content.count("\n", 0, start) + 1

    def highlight(self, context: str, matched: str) -> str:
        """Wrap every case-insensitive occurrence of ``matched`` in tags."""
        wrapped = f"{self.pre_tag}{matched}{self.post_tag}"
        return re.sub(re.escape(matched), lambda _: wrapped, context, flags=re.IGNORECASE)


def _window_bounds(size: int, start: int, end: int, length: int) -> Tuple[int, int]:
    return max(0, start - length), min(size, end + length)


__all__ = ["HitLocator"]
