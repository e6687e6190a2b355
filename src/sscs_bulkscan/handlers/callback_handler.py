"""CcdCallbackHandler — entry point for bulk-scan and CCD callbacks.

Flows:
    handle_validation            dry run: transform then validate, no CCD calls
    handle                       transform, validate, stamp codes and pick the create event
    handle_and_create            dry run, then create or match the case in CCD
    handle_validation_and_update validate a live case and stamp derived fields
"""

from __future__ import annotations

import logging

from sscs_bulkscan.core.exceptions import BenefitMappingError, InvalidExceptionRecordError
from sscs_bulkscan.core.protocols import ICaseTransformer, ICaseValidator
from sscs_bulkscan.handlers.case_data_handler import SscsCaseDataHandler
from sscs_bulkscan.models.case import (
    Callback,
    CaseCreationDetails,
    CaseRecord,
    CaseResponse,
    ExceptionCaseData,
    ExceptionRecord,
    HandlerResponse,
    PreSubmitCallbackResponse,
    SuccessfulTransformationResponse,
    Token,
)
from sscs_bulkscan.models.events import DirectionType, EventType
from sscs_bulkscan.rules.evaluator import RuleEvaluator
from sscs_bulkscan.rules.event_selector import EventSelector
from sscs_bulkscan.rules.referral import stamp_referred_case

logger = logging.getLogger(__name__)

CASE_TYPE_ID = "Benefit"

LOGSTR_VALIDATION_ERRORS = "Errors found while validating exception record id %s - %s"
LOGSTR_VALIDATION_WARNING = "Warnings found while validating exception record id %s - %s"

DIRECTION_ISSUED_EVENTS = frozenset({EventType.DIRECTION_ISSUED, EventType.DIRECTION_ISSUED_WELSH})


def _join(messages: list[str]) -> str:
    return ". ".join(messages)


class CcdCallbackHandler:
    def __init__(
        self,
        *,
        transformer: ICaseTransformer,
        validator: ICaseValidator,
        rule_evaluator: RuleEvaluator,
        event_selector: EventSelector,
        case_data_handler: SscsCaseDataHandler,
        case_type_id: str = CASE_TYPE_ID,
    ) -> None:
        self._transformer = transformer
        self._validator = validator
        self._rules = rule_evaluator
        self._events = event_selector
        self._case_data_handler = case_data_handler
        self._case_type_id = case_type_id

    def handle_validation(self, exception_record: ExceptionRecord) -> CaseResponse:
        logger.info("Processing callback for SSCS exception record")

        transformation = self._transformer.transform_exception_record(exception_record, True)
        if transformation.errors:
            logger.info("Errors found during validation")
            return transformation

        logger.info("Exception record id %s transformed successfully ready for validation",
                    exception_record.id)

        validation = self._validator.validate_exception_record(
            transformation, exception_record, transformation.transformed_case, True
        )
        if validation.transformed_case is None:
            validation.transformed_case = transformation.transformed_case
        return validation

    def handle(self, exception_record: ExceptionRecord) -> SuccessfulTransformationResponse:
        """Transform and validate an exception record into case creation details.

        Raises:
            InvalidExceptionRecordError: transformation or validation errors,
                or any warning on an automated submission.
        """
        record_id = exception_record.record_id
        automated = bool(exception_record.is_automated_process)

        logger.info("Processing callback for SSCS exception record id %s", record_id)
        logger.info("IsAutomatedProcess: %s", exception_record.is_automated_process)

        transformation = self._transformer.transform_exception_record(exception_record, False)

        if transformation.errors:
            logger.info("Errors found while transforming exception record id %s - %s",
                        record_id, _join(transformation.errors))
            raise InvalidExceptionRecordError(transformation.errors)

        if automated and transformation.warnings:
            logger.info("Warning found while transforming exception record id %s", record_id)
            raise InvalidExceptionRecordError(transformation.warnings)

        logger.info("Exception record id %s transformed successfully. "
                    "About to validate transformed case from exception", record_id)

        validation = self._validator.validate_exception_record(
            transformation, exception_record, transformation.transformed_case, False
        )

        if validation.errors:
            logger.info(LOGSTR_VALIDATION_ERRORS, record_id, _join(validation.errors))
            raise InvalidExceptionRecordError(validation.errors)
        if automated and validation.warnings:
            logger.info(LOGSTR_VALIDATION_WARNING, record_id, _join(validation.warnings))
            raise InvalidExceptionRecordError(validation.warnings)

        if validation.transformed_case is None:
            validation.transformed_case = transformation.transformed_case or CaseRecord()
        self._stamp_derived_fields(record_id, validation.transformed_case)

        event_id = self._events.find_event_to_create_case(validation)
        if self._events.is_non_compliant(event_id):
            stamp_referred_case(validation.transformed_case)

        return SuccessfulTransformationResponse(
            case_creation_details=CaseCreationDetails(
                case_type_id=self._case_type_id,
                event_id=event_id,
                case_data=validation.transformed_case,
            ),
            warnings=validation.warnings,
        )

    def handle_and_create(
        self,
        exception_record: ExceptionRecord,
        exception_case_data: ExceptionCaseData,
        ignore_warnings: bool,
        token: Token,
    ) -> tuple[HandlerResponse | None, list[str]]:
        """Transform, validate and create the case in one step.

        Returns the handler response (None when warnings are present and not
        ignored) together with the validation warnings.

        Raises:
            InvalidExceptionRecordError: errors, or warnings on an automated
                submission.
        """
        record_id = exception_record.record_id
        validation = self.handle_validation(exception_record)

        if validation.errors:
            logger.info(LOGSTR_VALIDATION_ERRORS, record_id, _join(validation.errors))
            raise InvalidExceptionRecordError(validation.errors)
        if exception_record.is_automated_process and validation.warnings:
            logger.info(LOGSTR_VALIDATION_WARNING, record_id, _join(validation.warnings))
            raise InvalidExceptionRecordError(validation.warnings)

        if validation.transformed_case is None:
            validation.transformed_case = CaseRecord()
        self._stamp_derived_fields(record_id, validation.transformed_case)

        result = self._case_data_handler.handle(
            exception_case_data, validation, ignore_warnings, token, record_id
        )
        return result, validation.warnings or []

    def handle_validation_and_update(self, callback: Callback, token: Token) -> PreSubmitCallbackResponse:
        case_details = callback.case_details
        case_data = case_details.case_data
        logger.info("Processing validation and update request for SSCS exception record id %s",
                    case_details.id)

        if case_data.interloc_review_state is not None:
            case_data.interloc_review_state = "none"

        self._rules.set_unsaved_fields(case_data)

        appeal_data = CaseRecord()
        self._rules.add_sscs_data_to_map(
            appeal_data,
            case_data.appeal,
            case_data.sscs_document,
            case_data.subscriptions,
            case_data.form_type,
            strict=False,
        )

        validation = self._validator.validate_validation_record(
            appeal_data, self._ignore_mrn_validation(callback)
        )

        error_response = self._convert_warnings_to_errors(case_data, validation)
        if error_response is not None:
            logger.info(LOGSTR_VALIDATION_ERRORS, case_details.id, ".")
            return error_response

        logger.info("Exception record id %s validated successfully", case_details.id)

        response = PreSubmitCallbackResponse(data=case_data)
        if validation.warnings:
            response.add_warnings(validation.warnings)

        nino = case_data.appeal.nino if case_data.appeal is not None else None
        self._case_data_handler.check_for_matches(nino, case_data, token, exclude_case_id=case_details.id)
        return response

    def _stamp_derived_fields(self, record_id: str | None, case: CaseRecord) -> None:
        """Derive codes, regional centre and venue for a case about to be created.

        An unmapped benefit type is fatal here and is reported like any other
        transformation error.
        """
        try:
            self._rules.add_sscs_data_to_map(
                case, case.appeal, case.sscs_document, case.subscriptions, case.form_type
            )
        except BenefitMappingError as exc:
            logger.info("Errors found while transforming exception record id %s - %s", record_id, exc)
            raise InvalidExceptionRecordError([str(exc)]) from exc

        if case.appeal is not None:
            venue = self._rules.find_processing_venue(case.appeal.appellant, case.appeal.benefit_type)
            if venue:
                case.processing_venue = venue

    @staticmethod
    def _ignore_mrn_validation(callback: Callback) -> bool:
        direction = callback.case_details.case_data.direction_type_dl
        if callback.event_id not in DIRECTION_ISSUED_EVENTS or direction is None or direction.value is None:
            return False
        return direction.value.code == DirectionType.APPEAL_TO_PROCEED

    @staticmethod
    def _convert_warnings_to_errors(case_data: CaseRecord,
                                    validation: CaseResponse) -> PreSubmitCallbackResponse | None:
        combined: list[str] = []

        if validation.warnings:
            logger.info(LOGSTR_VALIDATION_WARNING, case_data.ccd_case_id, _join(validation.warnings))
            combined.extend(validation.warnings)

        if validation.errors:
            logger.info(LOGSTR_VALIDATION_ERRORS, case_data.ccd_case_id, _join(validation.errors))
            combined.extend(validation.errors)

        if not combined:
            return None

        response = PreSubmitCallbackResponse(data=case_data)
        response.add_errors(combined)
        return response
