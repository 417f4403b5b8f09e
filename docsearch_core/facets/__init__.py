"""DocSearch Facet and Suggestion Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.facets.builder import FacetBuilder, FacetValue
from docsearch_core.facets.suggestions import SuggestionGenerator

__all__ = [
    "FacetBuilder",
    "FacetValue",
    "SuggestionGenerator",
]
