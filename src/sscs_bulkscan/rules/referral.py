"""Interlocutory referral reason for appeals routed as non-compliant."""

from __future__ import annotations

from typing import Optional

from sscs_bulkscan.models.appeal import Appeal
from sscs_bulkscan.models.case import CaseRecord
from sscs_bulkscan.models.events import InterlocReferralReason


def _not_blank(value: Optional[str]) -> bool:
    return value is not None and value.strip() != ""


def appeal_reason_is_not_blank(appeal: Optional[Appeal]) -> bool:
    """True when free-text other reasons or the first structured reason has text."""
    if appeal is None or appeal.appeal_reasons is None:
        return False
    reasons = appeal.appeal_reasons
    if _not_blank(reasons.other_reasons):
        return True
    if not reasons.reasons or reasons.reasons[0] is None or reasons.reasons[0].value is None:
        return False
    first = reasons.reasons[0].value
    return _not_blank(first.reason) or _not_blank(first.description)


def stamp_referred_case(record: CaseRecord) -> None:
    """Set ``interlocReferralReason`` on a case selected for the non-compliant event."""
    if appeal_reason_is_not_blank(record.appeal):
        record.interloc_referral_reason = InterlocReferralReason.OVER_13_MONTHS.value
    else:
        record.interloc_referral_reason = InterlocReferralReason.OVER_13_MONTHS_AND_GROUNDS_MISSING.value
