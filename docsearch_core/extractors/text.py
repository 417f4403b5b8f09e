"""DocSearch Text Extractors - Plain Text and CSV.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import csv
import io
from typing import Any, Dict, List

from docsearch_core.extractors.base import BaseExtractor, ExtractionResult, decode_text


class PlainTextExtractor(BaseExtractor):
    """Decodes text documents as UTF-8."""

    format = "txt"

    def supported_formats(self) -> List[str]:
        return ["txt", "text"]

    def extract(self, data: bytes, options: Dict[str, Any]) -> ExtractionResult:
        content = decode_text(data, options.get("encoding", "utf-8"))
        return ExtractionResult(
            content=content,
            metadata={
                "file_size": len(data),
                "line_count": content.count("\n") + 1,
            },
        )


class CSVExtractor(BaseExtractor):
    """Flattens CSV rows into searchable text.

    Each non-empty row becomes one line with cells joined by ``", "``.
    With ``has_headers`` (default) the first row is counted as a header
    rather than a data row.
    """

    format = "csv"

    def extract(self, data: bytes, options: Dict[str, Any]) -> ExtractionResult:
        text = decode_text(data, options.get("encoding", "utf-8"))
        delimiter = options.get("delimiter", ",")
        has_headers = options.get("has_headers", True)

        rows = [
            [cell.strip() for cell in row]
            for row in csv.reader(io.StringIO(text), delimiter=delimiter)
            if any(cell.strip() for cell in row)
        ]

        headers = rows[0] if has_headers and rows else []
        data_rows = rows[1:] if has_headers else rows

        return ExtractionResult(
            content="\n".join(", ".join(row) for row in rows),
            metadata={
                "file_size": len(data),
                "row_count": len(data_rows),
                "column_count": max((len(row) for row in rows), default=0),
                "headers": headers,
                "delimiter": delimiter,
            },
        )


__all__ = ["PlainTextExtractor", "CSVExtractor"]
