"""SscsCaseDataHandler — creates a CCD case from a validated exception record.

Dedup checks (explicit case reference, then NINO + benefit type + MRN date
search) always run before any create call. The check and the create are
not atomic: two concurrent submissions for the same appeal can both pass
the check.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from sscs_bulkscan.core.exceptions import CaseDataHelperError
from sscs_bulkscan.core.protocols import ICaseStore
from sscs_bulkscan.models.case import (
    CaseLink,
    CaseRecord,
    CaseResponse,
    ExceptionCaseData,
    HandlerResponse,
    Token,
)
from sscs_bulkscan.models.events import State
from sscs_bulkscan.rules.event_selector import EventSelector
from sscs_bulkscan.rules.referral import stamp_referred_case

logger = logging.getLogger(__name__)

NINO_FIELD = "case.appeal.appellant.identity.nino"
BENEFIT_TYPE_FIELD = "case.appeal.benefitType.code"
MRN_DATE_FIELD = "case.appeal.mrnDetails.mrnDate"

SEND_TO_DWP_SUMMARY = "Send to DWP"
SEND_TO_DWP_DESCRIPTION = "Send to DWP event has been triggered from Bulk Scan service"


class SscsCaseDataHandler:
    def __init__(self, *, case_store: ICaseStore, event_selector: EventSelector,
                 send_to_dwp_event_id: str) -> None:
        self._store = case_store
        self._events = event_selector
        self._send_to_dwp = send_to_dwp_event_id

    def handle(
        self,
        exception_case_data: ExceptionCaseData,
        case_validation_response: CaseResponse,
        ignore_warnings: bool,
        token: Token,
        exception_record_id: str | None,
    ) -> HandlerResponse | None:
        """Create the case unless one already exists; None when creation is gated off.

        Raises:
            httpx.HTTPError: the case store call failed (never wrapped).
            CaseDataHelperError: any other failure while creating or updating.
        """
        if not self.can_create_case(case_validation_response, ignore_warnings):
            return None

        record = case_validation_response.transformed_case
        if record is None:
            record = case_validation_response.transformed_case = CaseRecord()

        event_id = self._events.find_event_to_create_case(case_validation_response)
        if self._events.is_non_compliant(event_id):
            stamp_referred_case(record)

        case_reference = exception_case_data.case_details.case_data.case_reference or ""
        appeal = record.appeal
        nino = (appeal.nino if appeal is not None else None) or ""
        benefit_type = (appeal.benefit_code if appeal is not None else None) or ""
        mrn_date = (appeal.mrn_date if appeal is not None else None) or ""

        already_exists = False
        if case_reference:
            logger.info("Case %s already exists for exception record id %s",
                        case_reference, exception_record_id)
            already_exists = True
        elif nino and benefit_type and mrn_date:
            duplicates = self._store.find_case_by(
                {NINO_FIELD: nino, BENEFIT_TYPE_FIELD: benefit_type, MRN_DATE_FIELD: mrn_date},
                token,
            )
            if duplicates:
                logger.info(
                    "Duplicate case found for Nino %s , benefit type %s and mrnDate %s. "
                    "No need to continue with post create case processing.",
                    nino, benefit_type, mrn_date,
                )
                already_exists = True
                case_reference = str(duplicates[0]["id"])

        try:
            if not already_exists:
                record = self.check_for_matches(nino, record, token)

                case_id = self._store.create_case(record, token, event_id)
                logger.info("Case created with caseId %s from exception record id %s",
                            case_id, exception_record_id)

                if self._events.is_case_created_event(event_id):
                    logger.info("About to update case with sendToDwp event for id %s", case_id)
                    self._store.update_case(record, token, self._send_to_dwp, case_id,
                                            SEND_TO_DWP_SUMMARY, SEND_TO_DWP_DESCRIPTION)
                    logger.info("Case updated with sendToDwp event for id %s", case_id)
                case_reference = str(case_id)

            return HandlerResponse(state=State.SCANNED_RECORD_CASE_CREATED.value, case_id=case_reference)
        except httpx.HTTPError:
            raise
        except Exception as exc:
            logger.error("Error for exception id: %s", exception_record_id, exc_info=exc)
            raise CaseDataHelperError(exception_record_id, exc) from exc

    def check_for_matches(self, nino: str | None, record: CaseRecord, token: Token,
                          exclude_case_id: Any = None) -> CaseRecord:
        """Link every other case sharing the appellant's NINO."""
        matches: list[dict[str, Any]] = []
        if nino:
            matches = self._store.find_case_by({NINO_FIELD: nino}, token)
        if exclude_case_id is not None:
            matches = [m for m in matches if str(m.get("id")) != str(exclude_case_id)]
        return self.add_associated_cases(record, matches)

    @staticmethod
    def add_associated_cases(record: CaseRecord, matched_by_nino: list[dict[str, Any]]) -> CaseRecord:
        """Merge NINO matches into the record's existing links, one per case id."""
        links: dict[str, CaseLink] = {
            link.value.case_reference: link for link in record.associated_case or []
        }
        for case in matched_by_nino:
            case_id = str(case["id"])
            if case_id not in links:
                links[case_id] = CaseLink.to_case(case_id)
                logger.info("Added associated case %s", case_id)

        record.associated_case = list(links.values()) or None
        record.linked_cases_boolean = "Yes" if links else "No"
        return record

    @staticmethod
    def can_create_case(case_validation_response: CaseResponse, ignore_warnings: bool) -> bool:
        if case_validation_response.errors:
            return False
        return not case_validation_response.warnings or ignore_warnings
