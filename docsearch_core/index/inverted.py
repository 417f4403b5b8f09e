"""DocSearch Inverted Index - Term to Document Mapping.

The inverted index maps each term to the set of document identifiers
containing it. It is derived data: after every add, remove, or clear it
equals the union over stored documents of {term: {doc.id}} for every
term in that document's term map.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, Iterator, List, Set, Tuple

_EMPTY: FrozenSet[str] = frozenset()


class InvertedIndex:
    """Inverted index for full-text search.

    Posting sets are plain sets of document ids; positions and frequencies
    live on the documents themselves.
    """

    def __init__(self):
        """Initialize inverted index."""
        self._postings: Dict[str, Set[str]] = {}

    def add(self, term: str, doc_id: str) -> None:
        """Add a document to a term's posting set.

        Args:
            term: Term text
            doc_id: Document ID
        """
        postings = self._postings.get(term)
        if postings is None:
            postings = set()
            self._postings[term] = postings
        postings.add(doc_id)

    def add_document(self, doc_id: str, terms: Iterable[str]) -> None:
        """Index every term of a document.

        Args:
            doc_id: Document ID
            terms: Terms owned by the document
        """
        for term in terms:
            self.add(term, doc_id)

    def remove_document(self, doc_id: str, terms: Iterable[str]) -> int:
        """Remove a document from the posting sets of its terms.

        Terms whose posting set becomes empty are deleted entirely.

        Args:
            doc_id: Document ID
            terms: Terms owned by the document

        Returns:
            Number of terms dropped from the vocabulary
        """
        dropped = 0
        for term in terms:
            postings = self._postings.get(term)
            if postings is None:
                continue
            postings.discard(doc_id)
            if not postings:
                del self._postings[term]
                dropped += 1
        return dropped

    def postings(self, term: str) -> FrozenSet[str]:
        """Get the posting set for a term.

        Args:
            term: Term text

        Returns:
            Document IDs containing the term (empty if unknown)
        """
        postings = self._postings.get(term)
        return frozenset(postings) if postings else _EMPTY

    def document_frequency(self, term: str) -> int:
        """Get the number of documents containing a term."""
        postings = self._postings.get(term)
        return len(postings) if postings else 0

    def vocabulary(self) -> List[str]:
        """Get all indexed terms in sorted order."""
        return sorted(self._postings.keys())

    def items(self) -> Iterator[Tuple[str, FrozenSet[str]]]:
        """Iterate over (term, postings) pairs in sorted term order."""
        for term in self.vocabulary():
            yield term, frozenset(self._postings[term])

    def clear(self) -> None:
        """Remove all terms."""
        self._postings.clear()

    @property
    def term_count(self) -> int:
        """Get distinct term count."""
        return len(self._postings)

    def __contains__(self, term: object) -> bool:
        return term in self._postings

    def __len__(self) -> int:
        return len(self._postings)


__all__ = ["InvertedIndex"]
