"""DocSearch HTML Extractor.

Extracts visible text and heading structure from HTML with BeautifulSoup.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup  # type: ignore[import-untyped]

from docsearch_core.extractors.base import BaseExtractor, ExtractionResult, decode_text

HIDDEN_TAGS = ["script", "style", "noscript", "template"]


class HTMLExtractor(BaseExtractor):
    """Extractor for HTML documents."""

    format = "html"

    def supported_formats(self) -> List[str]:
        return ["html", "htm"]

    def extract(self, data: bytes, options: Dict[str, Any]) -> ExtractionResult:
        html = decode_text(data, options.get("encoding", "utf-8"))
        result = self.parse_html(html)
        result.metadata["file_size"] = len(data)
        return result

    def parse_html(self, html: str) -> ExtractionResult:
        """Parse an HTML string.

        Text nodes are stripped and joined one per line. Headings h1-h6
        are collected in document order. The title is the ``<title>``
        text, else the first ``<h1>``.
        """
        soup = BeautifulSoup(html, "html.parser")
        for tag in soup.find_all(HIDDEN_TAGS):
            tag.decompose()

        headings: List[Dict[str, Any]] = []
        for tag in soup.find_all(["h1", "h2", "h3", "h4", "h5", "h6"]):
            title = tag.get_text(" ", strip=True)
            if title:
                headings.append({"level": int(tag.name[1]), "title": title})

        title: Optional[str] = None
        if soup.title is not None:
            title = soup.title.get_text(" ", strip=True) or None
        if title is None:
            h1 = soup.find("h1")
            if h1 is not None:
                title = h1.get_text(" ", strip=True) or None

        metadata: Dict[str, Any] = {"headings": headings}
        if title:
            metadata["title"] = title

        return ExtractionResult(content=soup.get_text("\n", strip=True), metadata=metadata)


__all__ = ["HTMLExtractor"]
