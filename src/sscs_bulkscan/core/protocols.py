"""Protocol interfaces for all bulk-scan collaborators.

All inter-layer communication uses these Protocols — structural typing,
no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from sscs_bulkscan.core.types import CaseId, JsonDict, SearchCriteria
from sscs_bulkscan.models.case import CaseRecord, CaseResponse, ExceptionRecord, Token
from sscs_bulkscan.models.reference import OfficeMapping, ReferenceData


# ---------------------------------------------------------------------------
# Case-management store (CCD)
# ---------------------------------------------------------------------------

@runtime_checkable
class ICaseStore(Protocol):
    """Create, update and search cases in the external case-management store."""

    def find_case_by(self, criteria: SearchCriteria, token: Token) -> list[JsonDict]: ...

    def create_case(self, record: CaseRecord, token: Token, event_id: str) -> CaseId: ...

    def update_case(
        self,
        record: CaseRecord,
        token: Token,
        event_id: str,
        case_id: CaseId,
        summary: str,
        description: str,
    ) -> None: ...


# ---------------------------------------------------------------------------
# Form transformation and validation (external collaborators)
# ---------------------------------------------------------------------------

@runtime_checkable
class ICaseTransformer(Protocol):
    """Maps raw scanned OCR fields into a structured case."""

    def transform_exception_record(
        self, exception_record: ExceptionRecord, ignore_warnings: bool
    ) -> CaseResponse: ...


@runtime_checkable
class ICaseValidator(Protocol):
    """Applies business-rule validation to a transformed or live case."""

    def validate_exception_record(
        self,
        transform_response: CaseResponse,
        exception_record: ExceptionRecord,
        transformed_case: CaseRecord | None,
        ignore_warnings: bool,
    ) -> CaseResponse: ...

    def validate_validation_record(
        self, case_record: CaseRecord, ignore_mrn_validation: bool
    ) -> CaseResponse: ...


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------

@runtime_checkable
class IReferenceDataSource(Protocol):
    """Loads the read-only reference tables once at startup."""

    def load(self) -> ReferenceData: ...


@runtime_checkable
class IDwpAddressLookup(Protocol):
    """DWP issuing office to regional centre resolution."""

    def regional_centre(self, benefit_type: str, office: str) -> str | None: ...

    def office_mapping(self, benefit_type: str, office: str) -> OfficeMapping | None: ...


@runtime_checkable
class IVenueLookup(Protocol):
    """Postcode to hearing venue resolution."""

    def venue_for_postcode(self, postcode: str, benefit_type: str | None) -> str | None: ...


@runtime_checkable
class IPostcodeValidator(Protocol):
    """Two-stage postcode check: format, then existence."""

    def is_valid_postcode_format(self, postcode: str | None) -> bool: ...

    def is_valid(self, postcode: str | None) -> bool: ...
