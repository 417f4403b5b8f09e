"""DocSearch Exceptions - Error Hierarchy.

These exceptions allow callers to discriminate error categories
and handle them appropriately while preserving the original context.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Optional


class SearchError(Exception):
    """Base class for all DocSearch exceptions."""


class UnsupportedFormatError(SearchError):
    """Raised when no extractor is registered for a document format."""

    def __init__(self, format: str, message: Optional[str] = None):
        super().__init__(message or f"No extractor available for format: {format}")
        self.format = format


class ExtractionError(SearchError):
    """Raised when an extractor fails to produce text from document data."""

    def __init__(self, format: str, message: str):
        super().__init__(message)
        self.format = format


class DocumentNotFoundError(SearchError, KeyError):
    """Raised when a document id is not present in the index."""

    def __init__(self, document_id: str):
        super().__init__(f"Document not found: {document_id}")
        self.document_id = document_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class QueryError(SearchError):
    """Raised for invalid search options."""


__all__ = [
    "SearchError",
    "UnsupportedFormatError",
    "ExtractionError",
    "DocumentNotFoundError",
    "QueryError",
]
