"""DocSearch Extractors - Base Extractor and Registry.

Extractors turn raw document data into plain text and metadata. The
engine only sees ``(data, format) -> ExtractionResult``.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from docsearch_core.exceptions import ExtractionError, SearchError

logger = logging.getLogger(__name__)

DEFAULT_MAX_FILE_SIZE = 100 * 1024 * 1024  # 100 MiB

InputData = Union[bytes, bytearray, memoryview, str]


@dataclass
class ExtractionResult:
    """Extracted text and document metadata.

    Attributes:
        content: Plain text content
        metadata: Document metadata, optionally with a ``title``
    """

    content: str = ""
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def title(self) -> Optional[str]:
        return self.metadata.get("title") or None


def decode_text(data: bytes, encoding: str = "utf-8") -> str:
    """Decode bytes, replacing undecodable sequences."""
    return data.decode(encoding, errors="replace")


class BaseExtractor(ABC):
    """Base class for all extractors.

    Subclasses implement the blocking ``extract``; ``execute`` validates
    the input and runs it in a worker thread.
    """

    format: str = ""

    def __init__(self, max_file_size: int = DEFAULT_MAX_FILE_SIZE):
        self.max_file_size = max_file_size

    def supported_formats(self) -> List[str]:
        """Format tags this extractor handles."""
        return [self.format]

    @abstractmethod
    def extract(self, data: bytes, options: Dict[str, Any]) -> ExtractionResult:
        """Extract text from raw bytes.

        Args:
            data: Validated document bytes
            options: Extractor-specific options

        Returns:
            Extraction result
        """
        pass

    async def execute(
        self,
        data: Optional[InputData],
        options: Optional[Dict[str, Any]] = None,
    ) -> ExtractionResult:
        """Validate input and run extraction.

        Args:
            data: Raw document bytes or text
            options: Extractor-specific options

        Returns:
            Extraction result

        Raises:
            ExtractionError: If input is empty, too large, or extraction fails
        """
        payload = self.prepare(data)

        try:
            return await asyncio.to_thread(self.extract, payload, dict(options or {}))
        except SearchError:
            raise
        except Exception as e:
            logger.warning(f"{self.format} extraction failed: {e}")
            raise ExtractionError(self.format, f"Extraction failed: {e}") from e

    def prepare(self, data: Optional[InputData]) -> bytes:
        """Convert input to bytes and check its size."""
        if data is None or len(data) == 0:
            raise ExtractionError(self.format, "Input data is required")

        payload = data.encode("utf-8") if isinstance(data, str) else bytes(data)

        if self.max_file_size and len(payload) > self.max_file_size:
            raise ExtractionError(
                self.format,
                f"File size {len(payload)} exceeds maximum allowed {self.max_file_size}",
            )
        return payload


class ExtractorRegistry:
    """Maps format tags to extractors.

    Format tags are case-insensitive. Each engine owns its own registry.
    """

    def __init__(self):
        self._extractors: Dict[str, BaseExtractor] = {}

    def register(self, format: str, extractor: BaseExtractor) -> None:
        """Register an extractor for a format, replacing any existing one."""
        self._extractors[format.lower()] = extractor

    def register_extractor(self, extractor: BaseExtractor) -> None:
        """Register an extractor for all of its supported formats."""
        for format in extractor.supported_formats():
            self.register(format, extractor)

    def unregister(self, format: str) -> bool:
        return self._extractors.pop(format.lower(), None) is not None

    def get(self, format: str) -> Optional[BaseExtractor]:
        return self._extractors.get(format.lower())

    def has(self, format: str) -> bool:
        return format.lower() in self._extractors

    def formats(self) -> List[str]:
        """Registered format tags in registration order."""
        return list(self._extractors.keys())

    def clear(self) -> None:
        self._extractors.clear()

    def __contains__(self, format: object) -> bool:
        return isinstance(format, str) and self.has(format)

    def __len__(self) -> int:
        return len(self._extractors)


__all__ = [
    "BaseExtractor",
    "ExtractionResult",
    "ExtractorRegistry",
    "DEFAULT_MAX_FILE_SIZE",
    "decode_text",
]
