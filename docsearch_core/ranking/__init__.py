"""DocSearch Ranking Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.ranking.scorer import Scorer, ScoringContext, TFIDFScorer
from docsearch_core.ranking.similarity import edit_distance, is_similar, similarity
from docsearch_core.ranking.sorter import paginate, sort_hits

__all__ = [
    "Scorer",
    "ScoringContext",
    "TFIDFScorer",
    "edit_distance",
    "similarity",
    "is_similar",
    "sort_hits",
    "paginate",
]
