"""DocSearch Facet Builder - Faceted Result Summaries.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class FacetValue:
    """A single facet value with count."""

    value: str
    count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"value": self.value, "count": self.count}


class FacetBuilder:
    """Counts documents per value of one categorical field.

    Values are ordered by count descending, then by value ascending.
    """

    def __init__(self, field: str, size: Optional[int] = None):
        self.field = field
        self.size = size
        self._counts: Dict[str, int] = {}
        self._missing = 0

    def add(self, value: Optional[Any]) -> None:
        if value is None:
            self._missing += 1
        else:
            str_value = str(value)
            self._counts[str_value] = self._counts.get(str_value, 0) + 1

    def build(self) -> List[FacetValue]:
        sorted_values = sorted(self._counts.items(), key=lambda x: (-x[1], x[0]))
        if self.size is not None:
            sorted_values = sorted_values[:self.size]
        return [FacetValue(value=v, count=c) for v, c in sorted_values]

    @property
    def missing(self) -> int:
        return self._missing


__all__ = ["FacetBuilder", "FacetValue"]
