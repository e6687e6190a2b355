"""Structured appeal payload, the shape CCD stores under ``case.appeal``.

Field names are snake_case in Python and camelCase on the wire; every model
accepts either on input and dumps camelCase via ``by_alias=True``.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

CCD_MODEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class Name(BaseModel):
    title: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    model_config = CCD_MODEL_CONFIG


class Identity(BaseModel):
    nino: Optional[str] = None
    dob: Optional[str] = None

    model_config = CCD_MODEL_CONFIG


class Address(BaseModel):
    line1: Optional[str] = None
    line2: Optional[str] = None
    town: Optional[str] = None
    county: Optional[str] = None
    postcode: Optional[str] = None

    model_config = CCD_MODEL_CONFIG


class Appointee(BaseModel):
    name: Optional[Name] = None
    identity: Optional[Identity] = None
    address: Optional[Address] = None

    model_config = CCD_MODEL_CONFIG


class Appellant(BaseModel):
    name: Optional[Name] = None
    identity: Optional[Identity] = None
    address: Optional[Address] = None
    appointee: Optional[Appointee] = None

    model_config = CCD_MODEL_CONFIG


class BenefitType(BaseModel):
    code: Optional[str] = None
    description: Optional[str] = None

    model_config = CCD_MODEL_CONFIG


class MrnDetails(BaseModel):
    mrn_date: Optional[str] = None  # ISO yyyy-mm-dd
    dwp_issuing_office: Optional[str] = None
    mrn_late_reason: Optional[str] = None

    model_config = CCD_MODEL_CONFIG


class AppealReasonDetails(BaseModel):
    reason: Optional[str] = None
    description: Optional[str] = None

    model_config = CCD_MODEL_CONFIG


class AppealReason(BaseModel):
    """CCD collection item wrapping one structured reason."""

    value: Optional[AppealReasonDetails] = None

    model_config = CCD_MODEL_CONFIG


class AppealReasons(BaseModel):
    reasons: list[Optional[AppealReason]] = Field(default_factory=list)
    other_reasons: Optional[str] = None

    model_config = CCD_MODEL_CONFIG


class Appeal(BaseModel):
    """Single tribunal appeal as captured from the scanned form."""

    appellant: Optional[Appellant] = None
    benefit_type: Optional[BenefitType] = None
    mrn_details: Optional[MrnDetails] = None
    appeal_reasons: Optional[AppealReasons] = None
    signer: Optional[str] = None
    receipt_date: Optional[str] = None

    model_config = CCD_MODEL_CONFIG

    @property
    def nino(self) -> str | None:
        if self.appellant is not None and self.appellant.identity is not None:
            return self.appellant.identity.nino
        return None

    @property
    def benefit_code(self) -> str | None:
        return self.benefit_type.code if self.benefit_type is not None else None

    @property
    def mrn_date(self) -> str | None:
        return self.mrn_details.mrn_date if self.mrn_details is not None else None

    @property
    def dwp_issuing_office(self) -> str | None:
        return self.mrn_details.dwp_issuing_office if self.mrn_details is not None else None
