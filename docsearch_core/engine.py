"""DocSearch Core Engine - Main Search Engine Implementation.

The SearchEngine class is the primary interface for all search operations,
coordinating extraction, indexing, matching, hit location and ranking.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from docsearch_core.agents.guardian import IndexGuardian, IndexHealthReport
from docsearch_core.analyzers.base import Tokenizer
from docsearch_core.analyzers.tokenizers import WordTokenizer
from docsearch_core.config import SearchConfig, SearchOptions, SortBy, SortOrder
from docsearch_core.exceptions import DocumentNotFoundError, UnsupportedFormatError
from docsearch_core.extractors import ExtractorRegistry, create_default_registry
from docsearch_core.extractors.base import InputData
from docsearch_core.facets.builder import FacetBuilder
from docsearch_core.facets.suggestions import SuggestionGenerator
from docsearch_core.index.document import DocumentStore, IndexedDocument
from docsearch_core.index.inverted import InvertedIndex
from docsearch_core.query.locator import HitLocator
from docsearch_core.query.matcher import TermMatcher
from docsearch_core.query.parser import QueryParser
from docsearch_core.ranking.sorter import paginate, sort_hits
from docsearch_core.results import IndexStatistics, SearchHit, SearchResult

logger = logging.getLogger(__name__)

OptionsLike = Union[SearchOptions, Mapping[str, Any], None]


@dataclass
class IndexRequest:
    """One document of a batch indexing call.

    Attributes:
        data: Raw document bytes or text
        format: Format tag used to pick the extractor
        id: Document ID (generated if omitted)
        name: Display name (extracted title if omitted)
        custom_fields: Caller-supplied key/value bag
    """

    data: InputData
    format: str
    id: Optional[str] = None
    name: Optional[str] = None
    custom_fields: Dict[str, Any] = field(default_factory=dict)


class QueryBuilder:
    """Fluent query builder.

    Assembles a query string and option overrides, then calls
    ``SearchEngine.search``.
    """

    def __init__(self, engine: "SearchEngine"):
        """Initialize query builder.

        Args:
            engine: SearchEngine instance
        """
        self._engine = engine
        self._parts: List[str] = []
        self._options: Dict[str, Any] = {}

    def term(self, value: str) -> "QueryBuilder":
        """Add an optional term."""
        self._parts.append(value)
        return self

    def must_have(self, value: str) -> "QueryBuilder":
        """Add a required term."""
        self._parts.append(f"+{value}")
        return self

    def must_not_have(self, value: str) -> "QueryBuilder":
        """Add an excluded term."""
        self._parts.append(f"-{value}")
        return self

    def phrase(self, value: str) -> "QueryBuilder":
        """Add a quoted phrase."""
        self._parts.append(f'"{value}"')
        return self

    def case_sensitive(self) -> "QueryBuilder":
        self._options["case_sensitive"] = True
        return self

    def whole_word(self) -> "QueryBuilder":
        self._options["whole_word"] = True
        return self

    def regex(self) -> "QueryBuilder":
        self._options["use_regex"] = True
        return self

    def fuzzy(self, threshold: float = 0.8) -> "QueryBuilder":
        """Enable fuzzy matching.

        Args:
            threshold: Minimum similarity (inclusive)

        Returns:
            Self for chaining
        """
        self._options["fuzzy_match"] = True
        self._options["fuzzy_threshold"] = threshold
        return self

    def limit(self, max_results: int) -> "QueryBuilder":
        self._options["max_results"] = max_results
        return self

    def context_length(self, length: int) -> "QueryBuilder":
        self._options["context_length"] = length
        return self

    def sort_by(
        self,
        field: Union[SortBy, str],
        order: Union[SortOrder, str] = SortOrder.DESCENDING,
    ) -> "QueryBuilder":
        """Set hit ordering.

        Args:
            field: relevance, position or document
            order: ascending or descending

        Returns:
            Self for chaining
        """
        self._options["sort_by"] = field
        self._options["sort_order"] = order
        return self

    def get_query(self) -> str:
        """Get the assembled query string."""
        return " ".join(self._parts)

    def get_options(self) -> Dict[str, Any]:
        """Get the collected option overrides."""
        return dict(self._options)

    def reset(self) -> "QueryBuilder":
        """Clear query parts and options."""
        self._parts = []
        self._options = {}
        return self

    def execute(self) -> SearchResult:
        """Execute the query.

        Returns:
            Search results
        """
        return self._engine.search(self.get_query(), **self._options)


class SearchEngine:
    """Main search engine class.

    Owns a document store, an inverted index derived from it, and an
    extractor registry. Every index, remove and clear operation leaves
    the two structures consistent. The engine does no locking; callers
    must serialize mutations.
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        registry: Optional[ExtractorRegistry] = None,
        tokenizer: Optional[Tokenizer] = None,
    ):
        """Initialize search engine.

        Args:
            config: Engine configuration
            registry: Extractor registry (built-in extractors if omitted)
            tokenizer: Tokenizer for document text
        """
        self.config = config or SearchConfig()
        self.registry = registry if registry is not None else create_default_registry()
        self.tokenizer = tokenizer or WordTokenizer()

        self._store = DocumentStore()
        self._index = InvertedIndex()
        self._parser = QueryParser()
        self._matcher = TermMatcher(self._store, self._index)
        self._locator = HitLocator(
            self._store,
            self._index,
            pre_tag=self.config.highlight_pre_tag,
            post_tag=self.config.highlight_post_tag,
        )
        self._suggester = SuggestionGenerator(
            self._index,
            threshold=self.config.suggestion_threshold,
            max_suggestions=self.config.max_suggestions,
        )
        self._guardian = IndexGuardian()

        logger.info(f"Search engine created: {self.config.index_name}")

    # Indexing

    async def index_document(
        self,
        data: InputData,
        format: str,
        *,
        id: Optional[str] = None,
        name: Optional[str] = None,
        custom_fields: Optional[Dict[str, Any]] = None,
        extract_options: Optional[Dict[str, Any]] = None,
    ) -> IndexedDocument:
        """Extract and index a document.

        Args:
            data: Raw document bytes or text
            format: Format tag used to pick the extractor
            id: Document ID (generated if omitted)
            name: Display name (extracted title, else "Untitled")
            custom_fields: Caller-supplied key/value bag
            extract_options: Options passed to the extractor

        Returns:
            The stored document

        Raises:
            UnsupportedFormatError: If no extractor handles the format
            ExtractionError: If extraction fails
        """
        extractor = self.registry.get(format)
        if extractor is None:
            raise UnsupportedFormatError(format)

        extracted = await extractor.execute(data, extract_options)

        return self.index_text(
            extracted.content,
            format,
            id=id,
            name=name,
            metadata=extracted.metadata,
            custom_fields=custom_fields,
        )

    async def index_documents(
        self,
        items: Iterable[Union[IndexRequest, Mapping[str, Any]]],
    ) -> List[IndexedDocument]:
        """Index a batch of documents sequentially.

        The first failure propagates and aborts the rest of the batch.
        Documents indexed before it stay indexed.

        Args:
            items: IndexRequest objects or mappings with the same keys

        Returns:
            Stored documents in input order
        """
        documents: List[IndexedDocument] = []
        for item in items:
            request = item if isinstance(item, IndexRequest) else IndexRequest(**item)
            documents.append(await self.index_document(
                request.data,
                request.format,
                id=request.id,
                name=request.name,
                custom_fields=request.custom_fields,
            ))

        logger.info(f"Indexed batch of {len(documents)} documents")
        return documents

    def index_text(
        self,
        content: str,
        format: str = "txt",
        *,
        id: Optional[str] = None,
        name: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        custom_fields: Optional[Dict[str, Any]] = None,
    ) -> IndexedDocument:
        """Index already-extracted text.

        Re-indexing an existing ID replaces the old document.

        Args:
            content: Plain text content
            format: Source format tag
            id: Document ID (generated if omitted)
            name: Display name (metadata title, else "Untitled")
            metadata: Document metadata
            custom_fields: Caller-supplied key/value bag

        Returns:
            The stored document
        """
        metadata = dict(metadata or {})

        terms: Dict[str, List[int]] = {}
        term_frequencies: Dict[str, int] = {}
        tokens = self.tokenizer.tokenize(content)

        for token in tokens:
            if len(token) < self.config.min_term_length:
                continue
            terms.setdefault(token.text, []).append(token.position)
            term_frequencies[token.text] = term_frequencies.get(token.text, 0) + 1

        document = IndexedDocument(
            id=id or "",
            name=name or metadata.get("title") or "Untitled",
            format=format,
            metadata=metadata,
            content=content,
            terms=terms,
            term_frequencies=term_frequencies,
            word_count=len(tokens),
            custom_fields=dict(custom_fields or {}),
        )

        if document.id in self._store:
            self.remove_document(document.id)

        self._store.store(document)
        self._index.add_document(document.id, terms)

        logger.debug(f"Indexed document {document.id}: {len(tokens)} tokens, {len(terms)} terms")
        return document

    def remove_document(self, doc_id: str) -> bool:
        """Remove a document and its postings.

        Args:
            doc_id: Document ID

        Returns:
            True if removed, False if the ID was unknown
        """
        document = self._store.delete(doc_id)
        if document is None:
            return False

        dropped = self._index.remove_document(doc_id, document.terms)
        logger.debug(f"Removed document {doc_id}: {dropped} terms dropped")
        return True

    def clear_index(self) -> None:
        """Remove all documents and terms."""
        count = self._store.count()
        self._store.clear()
        self._index.clear()
        logger.info(f"Cleared index {self.config.index_name}: {count} documents removed")

    # Search

    def search(self, query: str, options: OptionsLike = None, **overrides: Any) -> SearchResult:
        """Execute a search query.

        Args:
            query: Query string
            options: Search options (engine defaults if omitted)
            **overrides: Individual option overrides

        Returns:
            Search results
        """
        opts = self._resolve_options(options, overrides)
        start_time = time.perf_counter()

        if not query or not query.strip():
            return SearchResult(query=query)

        parsed = self._parser.parse(query, case_sensitive=opts.case_sensitive)
        steps = self._matcher.plan(parsed, opts)
        candidates = self._matcher.match(steps, opts)

        hits: List[SearchHit] = []
        for doc_id in sorted(candidates):
            document = self._store.get(doc_id)
            if document is not None:
                hits.extend(self._locator.locate(document, steps, opts))

        ranked = sort_hits(hits, opts.sort_by, opts.sort_order)

        formats = FacetBuilder("format")
        for doc_id in candidates:
            document = self._store.get(doc_id)
            if document is not None:
                formats.add(document.format)

        suggestions = self._suggester.suggest(query) if not hits else []
        duration = (time.perf_counter() - start_time) * 1000

        logger.debug(
            f"Search {query!r}: {len(parsed)} clauses, {len(candidates)} candidates, "
            f"{len(hits)} hits in {duration:.2f}ms"
        )

        return SearchResult(
            query=query,
            total_hits=len(hits),
            hits=paginate(ranked, opts.max_results),
            facets={"format": formats.build()},
            suggestions=suggestions,
            search_duration=duration,
        )

    def search_in_document(
        self,
        doc_id: str,
        query: str,
        options: OptionsLike = None,
        **overrides: Any,
    ) -> List[SearchHit]:
        """Locate hits in a single document.

        No candidate matching, sorting or truncation is applied.

        Args:
            doc_id: Document ID
            query: Query string
            options: Search options (engine defaults if omitted)
            **overrides: Individual option overrides

        Returns:
            Hits in clause order, then position order

        Raises:
            DocumentNotFoundError: If the ID is unknown
        """
        document = self._store.get(doc_id)
        if document is None:
            raise DocumentNotFoundError(doc_id)

        opts = self._resolve_options(options, overrides)
        parsed = self._parser.parse(query, case_sensitive=opts.case_sensitive)
        steps = self._matcher.plan(parsed, opts)
        return self._locator.locate(document, steps, opts)

    def query_builder(self) -> QueryBuilder:
        """Create a query builder.

        Returns:
            QueryBuilder instance
        """
        return QueryBuilder(self)

    def _resolve_options(self, options: OptionsLike, overrides: Dict[str, Any]) -> SearchOptions:
        if options is None:
            base = self.config.default_options
        elif isinstance(options, SearchOptions):
            base = options
        else:
            base = self.config.default_options.merged(**options)
        return base.merged(**overrides)

    # Introspection

    def get_document(self, doc_id: str) -> Optional[IndexedDocument]:
        """Get a stored document by ID."""
        return self._store.get(doc_id)

    def get_document_ids(self) -> List[str]:
        """Get stored document IDs in indexing order."""
        return self._store.all_ids()

    def get_statistics(self) -> IndexStatistics:
        """Get index statistics.

        Returns:
            Index statistics
        """
        by_format: Dict[str, int] = {}
        total_words = 0
        estimated_size = 0

        for document in self._store:
            by_format[document.format] = by_format.get(document.format, 0) + 1
            total_words += document.word_count
            estimated_size += len(document.content) * 2 + 50 * len(document.terms)

        count = self._store.count()
        return IndexStatistics(
            total_documents=count,
            total_terms=self._index.term_count,
            average_document_length=total_words / count if count else 0.0,
            estimated_size=estimated_size,
            documents_by_format=by_format,
        )

    def check_health(self) -> IndexHealthReport:
        """Verify the document store and inverted index agree."""
        return self._guardian.check_consistency(self._store, self._index)

    @property
    def document_store(self) -> DocumentStore:
        return self._store

    @property
    def inverted_index(self) -> InvertedIndex:
        return self._index

    def __len__(self) -> int:
        return self._store.count()

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._store


__all__ = [
    "SearchEngine",
    "QueryBuilder",
    "IndexRequest",
]
