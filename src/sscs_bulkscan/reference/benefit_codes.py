"""Benefit, issue and case code generation.

Lookups return a ``CodeLookup`` rather than raising, so each caller decides
whether an unmapped benefit type is fatal (case creation) or ignorable
(stamping fields on a case that already exists).
"""

from __future__ import annotations

from dataclasses import dataclass

from sscs_bulkscan.core.exceptions import BenefitMappingError
from sscs_bulkscan.models.reference import ReferenceData

ISSUE_CODE = "DD"


@dataclass(frozen=True)
class CodeLookup:
    benefit_type: str | None
    value: str | None = None
    error: BenefitMappingError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> str:
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


class CaseCodeService:
    """Derives classification codes from the benefit type code."""

    def __init__(self, reference_data: ReferenceData) -> None:
        self._codes = {k.lower(): v for k, v in reference_data.benefit_codes.items()}

    def generate_benefit_code(self, benefit_type: str | None) -> CodeLookup:
        code = self._codes.get(benefit_type.strip().lower()) if benefit_type else None
        if code is None:
            return CodeLookup(benefit_type, error=BenefitMappingError(benefit_type))
        return CodeLookup(benefit_type, value=code)

    @staticmethod
    def generate_issue_code() -> str:
        return ISSUE_CODE

    @staticmethod
    def generate_case_code(benefit_code: str, issue_code: str) -> str:
        return benefit_code + issue_code
