"""DocSearch Index Guardian - Index Consistency Checks.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from docsearch_core.index.document import DocumentStore
from docsearch_core.index.inverted import InvertedIndex

logger = logging.getLogger(__name__)

@dataclass
class IndexHealthReport:
    """Index consistency assessment."""
    healthy: bool = True
    issues: List[str] = field(default_factory=list)
    documents_checked: int = 0
    terms_checked: int = 0
    timestamp: datetime = field(default_factory=datetime.now)

class IndexGuardian:
    """Index Guardian - verifies the document store and inverted index agree.

    Every posting must name a stored document that owns the term, and
    every term a document owns must list that document in the index.
    """

    def __init__(self, max_issues: int = 100):
        self.max_issues = max_issues
        self._last_check: Optional[datetime] = None
        self._stats = {"checks": 0, "unhealthy": 0}

    def check_consistency(self, store: DocumentStore, index: InvertedIndex) -> IndexHealthReport:
        """Check both directions of the store/index invariant."""
        self._stats["checks"] += 1
        self._last_check = datetime.now()

        report = IndexHealthReport()

        for term, postings in index.items():
            report.terms_checked += 1
            if not postings:
                report.issues.append(f"Term {term!r} has an empty posting set")
            for doc_id in sorted(postings):
                document = store.get(doc_id)
                if document is None:
                    report.issues.append(f"Term {term!r} points to missing document {doc_id!r}")
                elif not document.has_term(term):
                    report.issues.append(f"Term {term!r} points to document {doc_id!r} which does not contain it")

        for document in store:
            report.documents_checked += 1
            for term in document.terms:
                if document.id not in index.postings(term):
                    report.issues.append(f"Document {document.id!r} term {term!r} is missing from the index")

        if len(report.issues) > self.max_issues:
            dropped = len(report.issues) - self.max_issues
            report.issues = report.issues[:self.max_issues] + [f"... {dropped} more issues"]

        report.healthy = not report.issues
        if not report.healthy:
            self._stats["unhealthy"] += 1
            logger.warning(f"Index inconsistent: {len(report.issues)} issues")

        return report

    def get_statistics(self) -> Dict[str, Any]:
        return {
            **self._stats,
            "last_check": self._last_check.isoformat() if self._last_check else None,
        }

__all__ = ["IndexGuardian", "IndexHealthReport"]
