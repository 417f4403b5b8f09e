"""DocSearch Document Store - Indexed Document Management.

The document store owns one record per indexed document: the extracted
content, per-term positions and frequencies, and display metadata.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional


@dataclass
class IndexedDocument:
    """A document held by the document store.

    Attributes:
        id: Unique document identifier
        name: Display name
        format: Source format tag
        metadata: Metadata produced by extraction
        content: Full extracted text, never mutated after indexing
        terms: Term -> ordered word positions within this document
        term_frequencies: Term -> occurrence count within this document
        word_count: Total tokens, including ones too short to index
        indexed_at: Indexing timestamp
        custom_fields: Caller-supplied key/value bag
    """

    id: str
    name: str = "Untitled"
    format: str = "txt"
    metadata: Dict[str, Any] = field(default_factory=dict)
    content: str = ""
    terms: Dict[str, List[int]] = field(default_factory=dict)
    term_frequencies: Dict[str, int] = field(default_factory=dict)
    word_count: int = 0
    indexed_at: datetime = field(default_factory=datetime.now)
    custom_fields: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Generate ID if not provided."""
        if not self.id:
            self.id = str(uuid.uuid4())

    def term_frequency(self, term: str, default: int = 0) -> int:
        """Get occurrence count of a term in this document."""
        return self.term_frequencies.get(term, default)

    def has_term(self, term: str) -> bool:
        """Check whether the term was indexed for this document."""
        return term in self.terms

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "format": self.format,
            "metadata": self.metadata,
            "content": self.content,
            "terms": {t: list(p) for t, p in self.terms.items()},
            "term_frequencies": dict(self.term_frequencies),
            "word_count": self.word_count,
            "indexed_at": self.indexed_at.isoformat(),
            "custom_fields": self.custom_fields,
        }


class DocumentStore:
    """In-memory document store.

    Fast but not persistent; lives as long as its owning engine.
    """

    def __init__(self):
        """Initialize document store."""
        self._documents: Dict[str, IndexedDocument] = {}

    def store(self, document: IndexedDocument) -> None:
        """Store a document, replacing any record with the same id.

        Args:
            document: Document to store
        """
        self._documents[document.id] = document

    def get(self, doc_id: str) -> Optional[IndexedDocument]:
        """Get a document by ID.

        Args:
            doc_id: Document ID

        Returns:
            Document or None
        """
        return self._documents.get(doc_id)

    def delete(self, doc_id: str) -> Optional[IndexedDocument]:
        """Delete a document.

        Args:
            doc_id: Document ID

        Returns:
            The removed document, or None if absent
        """
        return self._documents.pop(doc_id, None)

    def exists(self, doc_id: str) -> bool:
        """Check if document exists."""
        return doc_id in self._documents

    def all_ids(self) -> List[str]:
        """Get document IDs in insertion order."""
        return list(self._documents.keys())

    def clear(self) -> None:
        """Remove all documents."""
        self._documents.clear()

    def count(self) -> int:
        """Get document count."""
        return len(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def __iter__(self) -> Iterator[IndexedDocument]:
        """Iterate over stored documents."""
        return iter(list(self._documents.values()))


__all__ = ["IndexedDocument", "DocumentStore"]
