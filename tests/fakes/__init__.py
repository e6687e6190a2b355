"""Shared test doubles — re-export memory backends and canned collaborators."""

from __future__ import annotations

from sscs_bulkscan.persistence.memory_backend import MemoryCaseStore, MemoryReferenceDataSource
from tests.fakes.builders import NINO, build_appeal, build_response, recent_mrn_date
from tests.fakes.collaborators import StaticTransformer, StaticValidator

__all__ = [
    "NINO",
    "MemoryCaseStore",
    "MemoryReferenceDataSource",
    "StaticTransformer",
    "StaticValidator",
    "build_appeal",
    "build_response",
    "recent_mrn_date",
]
