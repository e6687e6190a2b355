"""Closed enumerations for case events, states and referral reasons."""

from __future__ import annotations

from enum import StrEnum


class EventType(StrEnum):
    """CCD events raised by, or triggering, the bulk-scan handlers."""

    CASE_CREATED = "appealCreated"
    INCOMPLETE_APPLICATION = "incompleteApplication"
    NON_COMPLIANT = "nonCompliant"
    VALID_APPEAL_CREATED = "validAppealCreated"
    SEND_TO_DWP = "sendToDwp"
    VALID_APPEAL = "validAppeal"
    DIRECTION_ISSUED = "directionIssued"
    DIRECTION_ISSUED_WELSH = "directionIssuedWelsh"


class State(StrEnum):
    READY_TO_LIST = "readyToList"
    VALID_APPEAL = "validAppeal"
    SCANNED_RECORD_CASE_CREATED = "ScannedRecordCaseCreated"


class InterlocReferralReason(StrEnum):
    OVER_13_MONTHS = "over13months"
    OVER_13_MONTHS_AND_GROUNDS_MISSING = "over13MonthsAndGroundsMissing"


class DirectionType(StrEnum):
    APPEAL_TO_PROCEED = "appealToProceed"


class ValidationStatus(StrEnum):
    ERRORS = "ERRORS"
    WARNINGS = "WARNINGS"
    SUCCESS = "SUCCESS"
