"""DocSearch Query Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.query.parser import (
    QueryParser,
    ParsedQuery,
    QueryClause,
    ClauseType,
    RequiredClause,
    OptionalClause,
    ExcludedClause,
    PhraseClause,
)
from docsearch_core.query.matcher import (
    TermMatcher,
    PlanStep,
    build_pattern,
    evaluate_clauses,
)
from docsearch_core.query.locator import HitLocator

__all__ = [
    "QueryParser",
    "ParsedQuery",
    "QueryClause",
    "ClauseType",
    "RequiredClause",
    "OptionalClause",
    "ExcludedClause",
    "PhraseClause",
    "TermMatcher",
    "PlanStep",
    "build_pattern",
    "evaluate_clauses",
    "HitLocator",
]
