"""DocSearch - In-Memory Document Search Engine for BlackRoad OS.

A full-text search engine over text extracted from documents, with
boolean, phrase, fuzzy, whole-word and regex queries, TF-IDF hit
scoring, highlighted snippets, format facets and "did you mean"
suggestions.

Architecture:
┌─────────────────────────────────────────────────────────────────────────────┐
│                           DocSearch Engine                                  │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Ingest Pipeline                              │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐                     │   │
│   │  │  Extract   │→ │  Tokenize  │→ │   Index    │                     │   │
│   │  └────────────┘  └────────────┘  └────────────┘                     │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Query Pipeline                               │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐  ┌────────────┐    │   │
│   │  │   Parse    │→ │   Match    │→ │   Locate   │→ │    Rank    │    │   │
│   │  └────────────┘  └────────────┘  └────────────┘  └────────────┘    │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
│   ┌─────────────────────────────────────────────────────────────────────┐   │
│   │                        Index Layer                                  │   │
│   │  ┌────────────┐  ┌────────────┐  ┌────────────┐                     │   │
│   │  │  Inverted  │  │  Document  │  │   Index    │                     │   │
│   │  │   Index    │  │   Store    │  │  Guardian  │                     │   │
│   │  └────────────┘  └────────────┘  └────────────┘                     │   │
│   └─────────────────────────────────────────────────────────────────────┘   │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Key Features:
- Inverted index kept consistent with the document store
- +required, -excluded, optional and "phrase" query clauses
- Partial, whole-word, regex and edit-distance fuzzy matching
- TF-IDF scoring with context windows and <mark> highlighting
- Format facets and suggestions for queries with no hits
- Pluggable extractors for text, CSV, HTML and Markdown

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

__version__ = "1.0.0"
__author__ = "BlackRoad OS"
__license__ = "Proprietary"

# Core engine
from docsearch_core.engine import (
    SearchEngine,
    QueryBuilder,
    IndexRequest,
)
from docsearch_core.config import (
    SearchConfig,
    SearchOptions,
    SortBy,
    SortOrder,
)
from docsearch_core.results import (
    SearchHit,
    SearchResult,
    IndexStatistics,
)
from docsearch_core.exceptions import (
    SearchError,
    UnsupportedFormatError,
    ExtractionError,
    DocumentNotFoundError,
    QueryError,
)

# Index components
from docsearch_core.index.inverted import InvertedIndex
from docsearch_core.index.document import (
    DocumentStore,
    IndexedDocument,
)

# Query components
from docsearch_core.query.parser import (
    QueryParser,
    ParsedQuery,
    QueryClause,
    RequiredClause,
    OptionalClause,
    ExcludedClause,
    PhraseClause,
)
from docsearch_core.query.matcher import (
    TermMatcher,
    evaluate_clauses,
)
from docsearch_core.query.locator import HitLocator

# Analyzers
from docsearch_core.analyzers.base import (
    Token,
    Tokenizer,
)
from docsearch_core.analyzers.tokenizers import WordTokenizer

# Facets and suggestions
from docsearch_core.facets.builder import (
    FacetBuilder,
    FacetValue,
)
from docsearch_core.facets.suggestions import SuggestionGenerator

# Ranking
from docsearch_core.ranking.scorer import (
    Scorer,
    ScoringContext,
    TFIDFScorer,
)
from docsearch_core.ranking.similarity import (
    edit_distance,
    similarity,
)

# Extractors
from docsearch_core.extractors import (
    BaseExtractor,
    ExtractionResult,
    ExtractorRegistry,
    create_default_registry,
)

# Agents
from docsearch_core.agents import (
    IndexGuardian,
    IndexHealthReport,
)

__all__ = [
    # Version
    "__version__",
    "__author__",
    "__license__",
    # Core
    "SearchEngine",
    "QueryBuilder",
    "IndexRequest",
    "SearchConfig",
    "SearchOptions",
    "SortBy",
    "SortOrder",
    "SearchHit",
    "SearchResult",
    "IndexStatistics",
    # Errors
    "SearchError",
    "UnsupportedFormatError",
    "ExtractionError",
    "DocumentNotFoundError",
    "QueryError",
    # Index
    "InvertedIndex",
    "DocumentStore",
    "IndexedDocument",
    # Query
    "QueryParser",
    "ParsedQuery",
    "QueryClause",
    "RequiredClause",
    "OptionalClause",
    "ExcludedClause",
    "PhraseClause",
    "TermMatcher",
    "evaluate_clauses",
    "HitLocator",
    # Analyzers
    "Token",
    "Tokenizer",
    "WordTokenizer",
    # Facets
    "FacetBuilder",
    "FacetValue",
    "SuggestionGenerator",
    # Ranking
    "Scorer",
    "ScoringContext",
    "TFIDFScorer",
    "edit_distance",
    "similarity",
    # Extractors
    "BaseExtractor",
    "ExtractionResult",
    "ExtractorRegistry",
    "create_default_registry",
    # Agents
    "IndexGuardian",
    "IndexHealthReport",
]
