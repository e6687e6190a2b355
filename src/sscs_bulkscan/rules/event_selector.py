"""Picks the CCD event used to create a case."""

from __future__ import annotations

import calendar
from datetime import date
from typing import Optional

from sscs_bulkscan.core.config import CaseEventConfig
from sscs_bulkscan.models.appeal import MrnDetails
from sscs_bulkscan.models.case import CaseResponse

NON_COMPLIANT_AFTER_MONTHS = 13


def plus_months(d: date, months: int) -> date:
    """Calendar month arithmetic, clamped to the last day of the target month."""
    month_index = d.month - 1 + months
    year = d.year + month_index // 12
    month = month_index % 12 + 1
    day = min(d.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def parse_mrn_date(mrn_details: Optional[MrnDetails]) -> date | None:
    """ISO MRN date, or None when missing or unparseable."""
    if mrn_details is None or not mrn_details.mrn_date:
        return None
    try:
        return date.fromisoformat(mrn_details.mrn_date.strip())
    except ValueError:
        return None


class EventSelector:
    def __init__(self, events: CaseEventConfig) -> None:
        self._events = events

    def find_event_to_create_case(self, case_response: CaseResponse, today: date | None = None) -> str:
        """First match wins: warnings, then MRN over 13 months old, else valid appeal."""
        today = today or date.today()
        record = case_response.transformed_case
        appeal = record.appeal if record is not None else None
        mrn_date = parse_mrn_date(appeal.mrn_details if appeal is not None else None)

        if case_response.warnings:
            return self._events.incomplete_application
        if mrn_date is not None and plus_months(mrn_date, NON_COMPLIANT_AFTER_MONTHS) < today:
            return self._events.non_compliant
        return self._events.valid_appeal_created

    def is_case_created_event(self, event_id: str) -> bool:
        return event_id in (self._events.case_created, self._events.valid_appeal_created)

    def is_non_compliant(self, event_id: str) -> bool:
        return event_id == self._events.non_compliant
