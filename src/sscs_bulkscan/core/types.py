"""Type aliases used across the bulk-scan service."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]
CaseId = int
SearchCriteria = dict[str, str]
