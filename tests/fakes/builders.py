"""Builders for appeals and cases used across handler tests."""

from __future__ import annotations

from datetime import date, timedelta

from sscs_bulkscan.models.appeal import (
    Address,
    Appeal,
    Appellant,
    Appointee,
    BenefitType,
    Identity,
    MrnDetails,
)
from sscs_bulkscan.models.case import CaseRecord, CaseResponse

NINO = "JT123456N"


def recent_mrn_date(days: int = 30) -> str:
    return (date.today() - timedelta(days=days)).isoformat()


def build_appeal(
    benefit: str | None = "PIP",
    office: str | None = "3",
    mrn_date: str | None = None,
    nino: str | None = NINO,
    postcode: str | None = "SW12 9AB",
    appointee_postcode: str | None = None,
) -> Appeal:
    appointee = None
    if appointee_postcode is not None:
        appointee = Appointee(address=Address(postcode=appointee_postcode))
    return Appeal(
        appellant=Appellant(
            identity=Identity(nino=nino),
            address=Address(postcode=postcode),
            appointee=appointee,
        ),
        benefit_type=BenefitType(code=benefit) if benefit is not None else None,
        mrn_details=MrnDetails(
            mrn_date=mrn_date or recent_mrn_date(),
            dwp_issuing_office=office,
        ),
    )


def build_response(
    appeal: Appeal | None = None,
    errors: list[str] | None = None,
    warnings: list[str] | None = None,
) -> CaseResponse:
    return CaseResponse(
        transformed_case=CaseRecord(appeal=appeal or build_appeal()),
        errors=errors,
        warnings=warnings,
    )
