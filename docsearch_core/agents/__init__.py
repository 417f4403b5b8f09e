"""DocSearch Maintenance Agents.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from docsearch_core.agents.guardian import IndexGuardian, IndexHealthReport

__all__ = ["IndexGuardian", "IndexHealthReport"]
