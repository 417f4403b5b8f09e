"""DocSearch Index Components.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.index.document import DocumentStore, IndexedDocument
from docsearch_core.index.inverted import InvertedIndex

__all__ = ["DocumentStore", "IndexedDocument", "InvertedIndex"]
