"""DocSearch Markdown Extractor.

Converts Markdown to HTML with the ``markdown`` library, then reuses the
HTML extractor for text and headings.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Dict, List

import markdown as md  # type: ignore[import-untyped]

from docsearch_core.extractors.base import BaseExtractor, ExtractionResult, decode_text
from docsearch_core.extractors.html import HTMLExtractor


class MarkdownExtractor(BaseExtractor):
    """Extractor for Markdown documents.

    The title is the first heading of any level.
    """

    format = "md"

    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)
        self._html = HTMLExtractor(**kwargs)
        self._extensions = ["tables", "fenced_code", "sane_lists"]

    def supported_formats(self) -> List[str]:
        return ["md", "markdown"]

    def extract(self, data: bytes, options: Dict[str, Any]) -> ExtractionResult:
        text = decode_text(data, options.get("encoding", "utf-8"))
        html = md.markdown(text, extensions=self._extensions)
        result = self._html.parse_html(html)

        headings = result.metadata.get("headings", [])
        result.metadata.pop("title", None)
        if headings:
            result.metadata["title"] = headings[0]["title"]
        result.metadata["file_size"] = len(data)
        return result


__all__ = ["MarkdownExtractor"]
