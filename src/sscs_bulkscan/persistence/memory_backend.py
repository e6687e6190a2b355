"""In-memory backends for unit tests — dict-backed fakes."""

from __future__ import annotations

from typing import Any

from sscs_bulkscan.core.types import JsonDict, SearchCriteria
from sscs_bulkscan.models.case import CaseRecord, Token
from sscs_bulkscan.models.reference import ReferenceData


class MemoryCaseStore:
    """Dict-backed ICaseStore for unit tests.

    Search criteria use the CCD dotted-path form
    (``case.appeal.appellant.identity.nino``) and match exactly.
    """

    def __init__(self, first_case_id: int = 1000000000000001) -> None:
        self._cases: dict[int, dict[str, Any]] = {}
        self._next_id = first_case_id
        self.created: list[tuple[int, str]] = []
        self.updated: list[tuple[int, str]] = []
        self.searches: list[dict[str, str]] = []

    def add_case(self, case_id: int, data: dict[str, Any]) -> None:
        self._cases[case_id] = data

    def get_case(self, case_id: int) -> dict[str, Any]:
        return self._cases[case_id]

    @staticmethod
    def _resolve(data: dict[str, Any], dotted: str) -> Any:
        node: Any = data
        for part in dotted.removeprefix("case.").split("."):
            if not isinstance(node, dict):
                return None
            node = node.get(part)
        return node

    def find_case_by(self, criteria: SearchCriteria, token: Token) -> list[JsonDict]:
        self.searches.append(dict(criteria))
        return [
            {"id": case_id, "case_data": data}
            for case_id, data in self._cases.items()
            if all(self._resolve(data, k) == v for k, v in criteria.items())
        ]

    def create_case(self, record: CaseRecord, token: Token, event_id: str) -> int:
        case_id = self._next_id
        self._next_id += 1
        self._cases[case_id] = record.to_ccd()
        self.created.append((case_id, event_id))
        return case_id

    def update_case(self, record: CaseRecord, token: Token, event_id: str, case_id: int,
                    summary: str, description: str) -> None:
        self._cases[case_id] = record.to_ccd()
        self.updated.append((case_id, event_id))


class MemoryReferenceDataSource:
    """Canned IReferenceDataSource for unit tests."""

    def __init__(self, reference_data: ReferenceData | None = None) -> None:
        self._data = reference_data or ReferenceData()

    def load(self) -> ReferenceData:
        return self._data
