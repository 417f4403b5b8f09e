"""DocSearch Matcher - Candidate Document Selection.

Resolves each query clause to a set of document ids and combines the
sets with required/optional/excluded set algebra.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Set

from docsearch_core.config import SearchOptions
from docsearch_core.index.document import DocumentStore
from docsearch_core.index.inverted import InvertedIndex
from docsearch_core.query.parser import ParsedQuery, QueryClause
from docsearch_core.ranking.similarity import is_similar

logger = logging.getLogger(__name__)


@dataclass
class PlanStep:
    """One clause prepared for matching and hit location.

    Attributes:
        clause: Parsed clause
        pattern: Compiled content pattern (None for excluded clauses)
        expansions: Vocabulary terms a fuzzy clause expanded to
    """

    clause: QueryClause
    pattern: Optional[re.Pattern] = None
    expansions: List[str] = field(default_factory=list)

    @property
    def fuzzy(self) -> bool:
        return bool(self.expansions)


def build_pattern(
    term: str,
    options: SearchOptions,
    expansions: Optional[List[str]] = None,
) -> re.Pattern:
    """Compile the content pattern for a clause term.

    Fuzzy expansions match as whole words. Otherwise the term is used as
    a regex, a whole word, or a literal substring. An invalid regex falls
    back to the escaped literal.

    Args:
        term: Clause term
        options: Active search options
        expansions: Fuzzy vocabulary matches for the term

    Returns:
        Compiled pattern
    """
    flags = 0 if options.case_sensitive else re.IGNORECASE

    if expansions:
        ordered = sorted(expansions, key=lambda t: (-len(t), t))
        alternation = "|".join(re.escape(t) for t in ordered)
        return re.compile(rf"\b(?:{alternation})\b", flags)

    if options.use_regex:
        try:
            return re.compile(term, flags)
        except re.error as e:
            logger.warning(f"Invalid regex {term!r} ({e}); matching it literally")
            return re.compile(re.escape(term), flags)

    if options.whole_word:
        return re.compile(rf"\b{re.escape(term)}\b", flags)

    return re.compile(re.escape(term), flags)


def evaluate_clauses(
    clauses: Iterable[QueryClause],
    resolve: Callable[[QueryClause], Set[str]],
    postings: Callable[[str], FrozenSet[str]],
) -> Set[str]:
    """Combine per-clause document sets into the candidate set.

    Required and phrase clauses intersect the running set, optional
    clauses union into it, and the first non-excluded clause initializes
    it. Excluded clauses never narrow or seed the set; their exact
    postings are subtracted at the end.

    Args:
        clauses: Parsed clauses in query order
        resolve: Maps a non-excluded clause to its document set
        postings: Maps a lowercased term to its posting set

    Returns:
        Candidate document ids (empty if there are no clauses)
    """
    clauses = list(clauses)
    candidates: Optional[Set[str]] = None

    for clause in clauses:
        if clause.excluded:
            continue

        docs = set(resolve(clause))
        if candidates is None:
            candidates = docs
        elif clause.required:
            candidates &= docs
        else:
            candidates |= docs

    if candidates is None:
        return set()

    for clause in clauses:
        if clause.excluded:
            candidates -= postings(clause.term.lower())

    return candidates


class TermMatcher:
    """Resolves clauses against the inverted index and document store.

    Match modes, in order of precedence:
    - phrase: literal substring scan of every document's content
    - fuzzy: union of postings of similar vocabulary terms
    - regex: documents whose content the pattern matches
    - whole word: exact posting lookup
    - partial: union of postings of every vocabulary term containing the
      query term or contained in it

    Vocabulary lookups always use the lowercased term. Fuzzy and partial
    matching scan the whole vocabulary once per clause.
    """

    def __init__(self, store: DocumentStore, index: InvertedIndex):
        self.store = store
        self.index = index

    def fuzzy_terms(self, term: str, threshold: float) -> List[str]:
        """Vocabulary terms whose similarity to ``term`` reaches the threshold."""
        key = term.lower()
        return [t for t in self.index.vocabulary() if is_similar(key, t, threshold)]

    def plan(self, parsed: ParsedQuery, options: SearchOptions) -> List[PlanStep]:
        """Prepare every clause of a parsed query.

        Args:
            parsed: Parsed query
            options: Active search options

        Returns:
            One step per clause, in clause order
        """
        steps: List[PlanStep] = []
        for clause in parsed.clauses:
            if clause.excluded:
                steps.append(PlanStep(clause=clause))
                continue

            expansions: List[str] = []
            if options.fuzzy_match and not clause.phrase:
                expansions = self.fuzzy_terms(clause.term, options.fuzzy_threshold)

            steps.append(PlanStep(
                clause=clause,
                pattern=build_pattern(clause.term, options, expansions),
                expansions=expansions,
            ))
        return steps

    def resolve(self, step: PlanStep, options: SearchOptions) -> Set[str]:
        """Find the documents matching one non-excluded clause.

        Args:
            step: Prepared clause
            options: Active search options

        Returns:
            Matching document ids
        """
        clause = step.clause
        key = clause.term.lower()

        if clause.phrase:
            return {
                doc.id for doc in self.store
                if clause.term in (doc.content if options.case_sensitive else doc.content.lower())
            }

        if options.fuzzy_match:
            return self._union(step.expansions)

        if options.use_regex and step.pattern is not None:
            return {
                doc.id for doc in self.store
                if any(m.group(0) for m in step.pattern.finditer(doc.content))
            }

        if options.whole_word:
            return set(self.index.postings(key))

        return self._union(t for t in self.index.vocabulary() if key in t or t in key)

    def match(self, steps: List[PlanStep], options: SearchOptions) -> Set[str]:
        """Compute the candidate document set for prepared clauses."""
        by_clause: Dict[int, PlanStep] = {id(step.clause): step for step in steps}
        return evaluate_clauses(
            [step.clause for step in steps],
            lambda clause: self.resolve(by_clause[id(clause)], options),
            self.index.postings,
        )

    def _union(self, terms: Iterable[str]) -> Set[str]:
        docs: Set[str] = set()
        for term in terms:
            docs |= self.index.postings(term)
        return docs


__all__ = ["TermMatcher", "PlanStep", "build_pattern", "evaluate_clauses"]
