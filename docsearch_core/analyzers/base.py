"""DocSearch Analyzer Base - Core Text Analysis Components.

Provides the token type and tokenizer interface shared by document
indexing and query-side vocabulary comparisons.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass
class Token:
    """A token produced by a tokenizer.

    Attributes:
        text: Normalized token text
        position: Ordinal position among all tokens of the text
    """

    text: str
    position: int = 0

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"Token({self.text!r}, pos={self.position})"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {"text": self.text, "position": self.position}


class Tokenizer(ABC):
    """Base class for tokenizers.

    Tokenizers break text into a sequence of normalized tokens.
    """

    @abstractmethod
    def tokenize(self, text: str) -> List[Token]:
        """Tokenize text.

        Args:
            text: Input text

        Returns:
            Tokens in document order
        """
        pass

    def get_terms(self, text: str) -> List[str]:
        """Get token texts.

        Args:
            text: Input text

        Returns:
            List of term strings
        """
        return [token.text for token in self.tokenize(text)]


__all__ = ["Token", "Tokenizer"]
