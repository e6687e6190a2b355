"""Case, callback and response envelopes exchanged with CCD and bulk-scan.

``CaseRecord`` is the typed view of a CCD case map. Fields the handlers
read or stamp are declared; everything else the store or the transformer
puts on the case is kept as extra data so the record round-trips unchanged.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field

from sscs_bulkscan.models.appeal import CCD_MODEL_CONFIG, Appeal


class CaseLinkDetails(BaseModel):
    case_reference: str

    model_config = CCD_MODEL_CONFIG


class CaseLink(BaseModel):
    """CCD collection item referencing another case."""

    value: CaseLinkDetails

    model_config = CCD_MODEL_CONFIG

    @classmethod
    def to_case(cls, case_id: Any) -> CaseLink:
        return cls(value=CaseLinkDetails(case_reference=str(case_id)))


class DynamicListItem(BaseModel):
    code: Optional[str] = None
    label: Optional[str] = None

    model_config = CCD_MODEL_CONFIG


class DynamicList(BaseModel):
    value: Optional[DynamicListItem] = None
    list_items: list[DynamicListItem] = Field(default_factory=list)

    model_config = CCD_MODEL_CONFIG


class CaseRecord(BaseModel):
    """SSCS case data as stored in CCD."""

    # --- Payload ---
    appeal: Optional[Appeal] = None
    sscs_document: Optional[list[dict[str, Any]]] = None
    subscriptions: Optional[dict[str, Any]] = None
    form_type: Optional[str] = None

    # --- Derived routing fields ---
    evidence_present: Optional[str] = None  # "Yes" / "No"
    benefit_code: Optional[str] = None
    issue_code: Optional[str] = None
    case_code: Optional[str] = None  # benefit_code + issue_code
    dwp_regional_centre: Optional[str] = None
    created_in_gaps_from: Optional[str] = None
    processing_venue: Optional[str] = None

    # --- Workflow ---
    interloc_review_state: Optional[str] = None
    interloc_referral_reason: Optional[str] = None
    direction_type_dl: Optional[DynamicList] = None

    # --- Identity & linking ---
    ccd_case_id: Optional[str] = None
    case_reference: Optional[str] = None
    associated_case: Optional[list[CaseLink]] = None
    linked_cases_boolean: Optional[str] = None  # "Yes" / "No"

    model_config = {**CCD_MODEL_CONFIG, "extra": "allow"}

    def to_ccd(self) -> dict[str, Any]:
        """Dump to the camelCase map CCD expects, dropping unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class CaseResponse(BaseModel):
    """Outcome of a transformation or validation step."""

    transformed_case: Optional[CaseRecord] = None
    errors: Optional[list[str]] = None
    warnings: Optional[list[str]] = None
    status: Optional[str] = None

    model_config = CCD_MODEL_CONFIG


class Token(BaseModel):
    """Credential bundle passed through to CCD; never persisted or logged."""

    user_auth_token: str = Field(repr=False)
    service_auth_token: str = Field(repr=False)
    user_id: str


# ---------------------------------------------------------------------------
# Bulk-scan envelopes (snake_case on the wire)
# ---------------------------------------------------------------------------

class ExceptionRecord(BaseModel):
    """Scanned paper submission awaiting transformation."""

    id: Optional[str] = None
    exception_record_id: Optional[str] = None  # newer requests; preferred over id
    case_type_id: Optional[str] = None
    po_box: Optional[str] = None
    journey_classification: Optional[str] = None
    form_type: Optional[str] = None
    delivery_date: Optional[str] = None
    opening_date: Optional[str] = None
    scanned_documents: list[dict[str, Any]] = Field(default_factory=list)
    ocr_data_fields: list[dict[str, Any]] = Field(default_factory=list)
    is_automated_process: Optional[bool] = None

    @property
    def record_id(self) -> str | None:
        if self.exception_record_id and self.exception_record_id.strip():
            return self.exception_record_id
        return self.id


class CaseDetails(BaseModel):
    id: Optional[int] = None
    jurisdiction: Optional[str] = None
    case_type_id: Optional[str] = None
    state: Optional[str] = None
    case_data: CaseRecord = Field(default_factory=CaseRecord)
    created_date: Optional[str] = None


class ExceptionCaseData(BaseModel):
    """CCD callback body for an exception record case."""

    case_details: CaseDetails = Field(default_factory=CaseDetails)
    event_id: Optional[str] = None
    ignore_warning: bool = False


class Callback(BaseModel):
    """CCD about-to-submit callback for a live SSCS case."""

    case_details: CaseDetails
    case_details_before: Optional[CaseDetails] = None
    event_id: Optional[str] = None
    ignore_warning: bool = False


class PreSubmitCallbackResponse(BaseModel):
    data: CaseRecord
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)

    def add_errors(self, errors: list[str]) -> None:
        self.errors.extend(errors)

    def add_warnings(self, warnings: list[str]) -> None:
        self.warnings.extend(warnings)


class CaseCreationDetails(BaseModel):
    case_type_id: str
    event_id: str
    case_data: CaseRecord


class SuccessfulTransformationResponse(BaseModel):
    case_creation_details: CaseCreationDetails
    warnings: Optional[list[str]] = None


class HandlerResponse(BaseModel):
    state: str
    case_id: str
