"""SSCS bulk-scan exception hierarchy."""

from __future__ import annotations


class BulkScanError(Exception):
    """Base exception for all bulk-scan errors."""


class InvalidExceptionRecordError(BulkScanError):
    """Exception record failed transformation or validation.

    Carries the caller-visible messages (errors, or warnings escalated to
    errors for automated submissions).
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__(". ".join(self.errors))


class CaseDataHelperError(BulkScanError):
    """Unexpected failure while creating or updating a case in CCD."""

    def __init__(self, exception_record_id: str | None, cause: Exception) -> None:
        self.exception_record_id = exception_record_id
        self.cause = cause
        super().__init__(f"Error for exception id {exception_record_id}: {cause}")


class BenefitMappingError(BulkScanError):
    """Benefit type code has no entry in the benefit code table."""

    def __init__(self, benefit_type: str | None) -> None:
        self.benefit_type = benefit_type
        super().__init__(f"Benefit type {benefit_type!r} has no benefit code mapping")


class ReferenceDataError(BulkScanError):
    """Reference tables could not be loaded."""
