"""DocSearch Query Parser - Query String Parsing.

Parses query strings into a flat list of typed clauses:

- "some phrase": phrase clause, always required
- +term: required clause
- -term: excluded clause
- term: optional clause

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Dict, List

PHRASE_PATTERN = re.compile(r'"([^"]+)"')


class ClauseType(Enum):
    """Query clause type enumeration."""

    REQUIRED = auto()
    OPTIONAL = auto()
    EXCLUDED = auto()
    PHRASE = auto()


@dataclass
class QueryClause(ABC):
    """Abstract base class for query clauses.

    Attributes:
        term: Clause text, case-folded unless parsing was case-sensitive
    """

    clause_type: ClauseType = field(init=False)
    term: str = ""

    @abstractmethod
    def to_string(self) -> str:
        """Convert to query string representation."""
        pass

    @property
    def required(self) -> bool:
        return self.clause_type in (ClauseType.REQUIRED, ClauseType.PHRASE)

    @property
    def excluded(self) -> bool:
        return self.clause_type is ClauseType.EXCLUDED

    @property
    def phrase(self) -> bool:
        return self.clause_type is ClauseType.PHRASE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "type": self.clause_type.name,
            "term": self.term,
            "required": self.required,
            "excluded": self.excluded,
            "phrase": self.phrase,
        }


@dataclass
class RequiredClause(QueryClause):
    """Term every matching document must contain."""

    def __post_init__(self):
        self.clause_type = ClauseType.REQUIRED

    def to_string(self) -> str:
        return f"+{self.term}"


@dataclass
class OptionalClause(QueryClause):
    """Term that widens the candidate set."""

    def __post_init__(self):
        self.clause_type = ClauseType.OPTIONAL

    def to_string(self) -> str:
        return self.term


@dataclass
class ExcludedClause(QueryClause):
    """Term whose documents are removed from the candidate set."""

    def __post_init__(self):
        self.clause_type = ClauseType.EXCLUDED

    def to_string(self) -> str:
        return f"-{self.term}"


@dataclass
class PhraseClause(QueryClause):
    """Literal substring, matched as a whole and always required."""

    def __post_init__(self):
        self.clause_type = ClauseType.PHRASE

    def to_string(self) -> str:
        return f'"{self.term}"'


@dataclass
class ParsedQuery:
    """Result of query parsing.

    Attributes:
        clauses: Clauses in parse order, phrases first
        original: Original query string
    """

    clauses: List[QueryClause] = field(default_factory=list)
    original: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.clauses

    @property
    def terms(self) -> List[str]:
        """Terms of all non-excluded clauses."""
        return [c.term for c in self.clauses if not c.excluded]

    def to_string(self) -> str:
        return " ".join(c.to_string() for c in self.clauses)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "original": self.original,
            "clauses": [c.to_dict() for c in self.clauses],
        }

    def __len__(self) -> int:
        return len(self.clauses)

    def __iter__(self):
        return iter(self.clauses)


class QueryParser:
    """Parser for query strings.

    Query Syntax:
    - term: Optional term, unions into the candidate set
    - +term: Required term, intersects the candidate set
    - -term: Excluded term, subtracts its postings
    - "a phrase": Required literal substring

    Quoted phrases are extracted first and lowercased as-is. The rest of
    the query is split on whitespace. Only one leading ``+`` or ``-`` is
    stripped, and tokens that are empty after stripping are dropped.
    """

    def parse(self, query: str, case_sensitive: bool = False) -> ParsedQuery:
        """Parse query string.

        Args:
            query: Query string
            case_sensitive: Keep the case of non-phrase terms

        Returns:
            Parsed query
        """
        clauses: List[QueryClause] = []

        for match in PHRASE_PATTERN.finditer(query):
            clauses.append(PhraseClause(term=match.group(1).lower()))

        remaining = PHRASE_PATTERN.sub("", query)

        for word in remaining.split():
            clause_cls = OptionalClause
            if word.startswith("+"):
                clause_cls = RequiredClause
                word = word[1:]
            elif word.startswith("-"):
                clause_cls = ExcludedClause
                word = word[1:]

            if not word:
                continue

            clauses.append(clause_cls(term=word if case_sensitive else word.lower()))

        return ParsedQuery(clauses=clauses, original=query)


__all__ = [
    "QueryParser",
    "ParsedQuery",
    "QueryClause",
    "ClauseType",
    "RequiredClause",
    "OptionalClause",
    "ExcludedClause",
    "PhraseClause",
]
