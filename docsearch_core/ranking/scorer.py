"""DocSearch Scorer - TF-IDF Hit Scoring.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class ScoringContext:
    """Context for scoring operations.

    Attributes:
        total_docs: Number of documents in the index
        doc_freq: Size of the term's posting set
        term_freq: Occurrences of the term in the scored document
        field_length: Token count of the scored document
    """

    total_docs: int = 0
    doc_freq: int = 0
    term_freq: int = 0
    field_length: int = 0


class Scorer(ABC):
    """Base scorer class."""

    @abstractmethod
    def score(self, context: ScoringContext) -> float:
        pass

    def explain(self, context: ScoringContext) -> Dict[str, Any]:
        return {"score": self.score(context), "description": "base scorer"}


class TFIDFScorer(Scorer):
    """Unsmoothed TF-IDF scorer.

    tf = term_freq / field_length, idf = ln(total_docs / max(1, doc_freq)).
    A term present in every document has idf 0, so all its hits score 0.
    """

    def tf(self, context: ScoringContext) -> float:
        if context.field_length <= 0:
            return 0.0
        return context.term_freq / context.field_length

    def idf(self, context: ScoringContext) -> float:
        if context.total_docs <= 0:
            return 0.0
        return math.log(context.total_docs / max(1, context.doc_freq))

    def score(self, context: ScoringContext) -> float:
        return self.tf(context) * self.idf(context)

    def explain(self, context: ScoringContext) -> Dict[str, Any]:
        tf = self.tf(context)
        idf = self.idf(context)
        return {
            "score": tf * idf,
            "description": f"TFIDF(tf={context.term_freq}/{context.field_length}, df={context.doc_freq}, N={context.total_docs})",
            "details": {"tf": tf, "idf": idf},
        }


__all__ = ["Scorer", "ScoringContext", "TFIDFScorer"]
