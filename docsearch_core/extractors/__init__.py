"""DocSearch Extractors.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.extractors.base import (
    BaseExtractor,
    ExtractionResult,
    ExtractorRegistry,
    DEFAULT_MAX_FILE_SIZE,
    decode_text,
)
from docsearch_core.extractors.text import PlainTextExtractor, CSVExtractor
from docsearch_core.extractors.html import HTMLExtractor
from docsearch_core.extractors.markdown import MarkdownExtractor


def create_default_registry() -> ExtractorRegistry:
    """Create a registry with the built-in text, CSV, HTML and Markdown extractors."""
    registry = ExtractorRegistry()
    for extractor in (PlainTextExtractor(), CSVExtractor(), HTMLExtractor(), MarkdownExtractor()):
        registry.register_extractor(extractor)
    return registry


__all__ = [
    "BaseExtractor",
    "ExtractionResult",
    "ExtractorRegistry",
    "DEFAULT_MAX_FILE_SIZE",
    "decode_text",
    "PlainTextExtractor",
    "CSVExtractor",
    "HTMLExtractor",
    "MarkdownExtractor",
    "create_default_registry",
]
