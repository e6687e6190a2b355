"""Derives routing and classification fields for a case.

Never calls the case store; every lookup goes through the read-only
reference tables injected at construction time.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from sscs_bulkscan.core.protocols import IDwpAddressLookup, IPostcodeValidator, IVenueLookup
from sscs_bulkscan.models.appeal import Appeal, Appellant, BenefitType
from sscs_bulkscan.models.case import CaseRecord
from sscs_bulkscan.models.events import State, ValidationStatus
from sscs_bulkscan.reference.benefit_codes import CaseCodeService

logger = logging.getLogger(__name__)


class RuleEvaluator:
    def __init__(
        self,
        *,
        case_codes: CaseCodeService,
        dwp_lookup: IDwpAddressLookup,
        venue_lookup: IVenueLookup,
        postcode_validator: IPostcodeValidator,
        ready_to_list_offices: list[str],
    ) -> None:
        self._codes = case_codes
        self._dwp = dwp_lookup
        self._venues = venue_lookup
        self._postcodes = postcode_validator
        self._ready_to_list_offices = frozenset(ready_to_list_offices)

    def add_sscs_data_to_map(
        self,
        record: CaseRecord,
        appeal: Optional[Appeal],
        sscs_documents: Optional[list[dict[str, Any]]],
        subscriptions: Optional[dict[str, Any]],
        form_type: Optional[str],
        *,
        strict: bool = True,
    ) -> None:
        """Stamp the appeal and its derived fields onto ``record``.

        Raises:
            BenefitMappingError: the appeal's benefit type has no code and
                ``strict`` is set. Non-strict callers get the code fields
                left unset instead.
        """
        record.appeal = appeal
        record.sscs_document = sscs_documents
        record.evidence_present = self.has_evidence(sscs_documents)
        record.subscriptions = subscriptions
        record.form_type = form_type

        if appeal is None:
            return

        if appeal.benefit_type is not None:
            self._stamp_codes(record, appeal, strict=strict)

            if appeal.dwp_issuing_office is not None:
                record.dwp_regional_centre = self._dwp.regional_centre(
                    appeal.benefit_code, appeal.dwp_issuing_office
                )

        record.created_in_gaps_from = self.created_in_gaps_from(appeal)

    def set_unsaved_fields(self, case_data: CaseRecord) -> None:
        """Stamp derived fields on a case that already exists in CCD.

        An unmapped benefit type is not fatal here: the code fields are left
        unset and the rest of the case is still processed.
        """
        appeal = case_data.appeal
        case_data.created_in_gaps_from = State.READY_TO_LIST.value
        case_data.evidence_present = self.has_evidence(case_data.sscs_document)

        if appeal is None or not (appeal.benefit_code or "").strip():
            return

        self._stamp_codes(case_data, appeal, strict=False)

        if appeal.dwp_issuing_office is not None:
            case_data.dwp_regional_centre = self._dwp.regional_centre(
                appeal.benefit_code, appeal.dwp_issuing_office
            )

        venue = self.find_processing_venue(appeal.appellant, appeal.benefit_type)
        if venue and venue.strip():
            case_data.processing_venue = venue

    def _stamp_codes(self, record: CaseRecord, appeal: Appeal, *, strict: bool) -> None:
        lookup = self._codes.generate_benefit_code(appeal.benefit_code)
        if strict:
            lookup.unwrap()
        if not lookup.ok:
            logger.info("No benefit code for benefit type %s, case codes left unset", lookup.benefit_type)
            record.benefit_code = None
            record.issue_code = None
            record.case_code = None
            return

        issue_code = self._codes.generate_issue_code()
        record.benefit_code = lookup.value
        record.issue_code = issue_code
        record.case_code = self._codes.generate_case_code(lookup.value, issue_code)

    @staticmethod
    def has_evidence(sscs_documents: Optional[list[dict[str, Any]]]) -> str:
        return "Yes" if sscs_documents else "No"

    def created_in_gaps_from(self, appeal: Optional[Appeal]) -> str | None:
        if (
            appeal is None
            or appeal.mrn_details is None
            or appeal.dwp_issuing_office is None
            or appeal.benefit_type is None
        ):
            return None

        mapping = self._dwp.office_mapping(appeal.benefit_code, appeal.dwp_issuing_office)
        if mapping is not None and mapping.code in self._ready_to_list_offices:
            return State.READY_TO_LIST.value
        return State.VALID_APPEAL.value

    def find_processing_venue(
        self, appellant: Optional[Appellant], benefit_type: Optional[BenefitType]
    ) -> str | None:
        """Venue for the appointee's postcode, else the appellant's."""
        if appellant is None:
            return None

        postcode = None
        appointee = appellant.appointee
        if appointee is not None and appointee.address is not None \
                and self._is_valid_postcode(appointee.address.postcode):
            postcode = appointee.address.postcode
        elif appellant.address is not None and self._is_valid_postcode(appellant.address.postcode):
            postcode = appellant.address.postcode

        if postcode:
            return self._venues.venue_for_postcode(
                postcode, benefit_type.code if benefit_type is not None else None
            )
        return None

    def _is_valid_postcode(self, postcode: str | None) -> bool:
        return self._postcodes.is_valid_postcode_format(postcode) and self._postcodes.is_valid(postcode)

    @staticmethod
    def validation_status(errors: list[str] | None, warnings: list[str] | None) -> ValidationStatus:
        if errors:
            return ValidationStatus.ERRORS
        if warnings:
            return ValidationStatus.WARNINGS
        return ValidationStatus.SUCCESS
