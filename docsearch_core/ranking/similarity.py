"""DocSearch Similarity - Edit-Distance String Similarity.

Normalized Levenshtein similarity used for fuzzy term expansion and
"did you mean" suggestions.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations


def edit_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein edit distance.

    Insertions, deletions and substitutions all cost 1.
    """
    if len(s1) < len(s2):
        return edit_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]


def similarity(s1: str, s2: str) -> float:
    """Normalized similarity in [0, 1].

    (max_len - distance) / max_len, where max_len is the length of the
    longer string. Identical strings score 1; an empty string against a
    non-empty one scores 0.
    """
    if s1 == s2:
        return 1.0
    if not s1 or not s2:
        return 0.0

    max_len = max(len(s1), len(s2))
    return (max_len - edit_distance(s1, s2)) / max_len


def is_similar(s1: str, s2: str, threshold: float) -> bool:
    """Check whether similarity reaches the threshold (inclusive)."""
    return similarity(s1, s2) >= threshold


__all__ = ["edit_distance", "similarity", "is_similar"]
