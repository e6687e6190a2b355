"""Builds the handler graph from settings, reference data and collaborators."""

from __future__ import annotations

from dataclasses import dataclass

from sscs_bulkscan.core.config import AppSettings
from sscs_bulkscan.core.protocols import ICaseStore, ICaseTransformer, ICaseValidator
from sscs_bulkscan.handlers.callback_handler import CcdCallbackHandler
from sscs_bulkscan.handlers.case_data_handler import SscsCaseDataHandler
from sscs_bulkscan.models.reference import ReferenceData
from sscs_bulkscan.reference.benefit_codes import CaseCodeService
from sscs_bulkscan.reference.dwp_lookup import DwpAddressLookup
from sscs_bulkscan.reference.postcode import PostcodeValidator
from sscs_bulkscan.reference.venue_lookup import VenueLookup
from sscs_bulkscan.rules.evaluator import RuleEvaluator
from sscs_bulkscan.rules.event_selector import EventSelector


@dataclass(frozen=True)
class Handlers:
    callback_handler: CcdCallbackHandler
    case_data_handler: SscsCaseDataHandler
    rule_evaluator: RuleEvaluator
    dwp_lookup: DwpAddressLookup
    venue_lookup: VenueLookup


def build_handlers(
    *,
    settings: AppSettings,
    reference_data: ReferenceData,
    case_store: ICaseStore,
    transformer: ICaseTransformer,
    validator: ICaseValidator,
) -> Handlers:
    dwp_lookup = DwpAddressLookup(reference_data)
    venue_lookup = VenueLookup(reference_data)
    rule_evaluator = RuleEvaluator(
        case_codes=CaseCodeService(reference_data),
        dwp_lookup=dwp_lookup,
        venue_lookup=venue_lookup,
        postcode_validator=PostcodeValidator(venue_lookup),
        ready_to_list_offices=settings.reference.ready_to_list_offices,
    )
    event_selector = EventSelector(settings.events)
    case_data_handler = SscsCaseDataHandler(
        case_store=case_store,
        event_selector=event_selector,
        send_to_dwp_event_id=settings.events.send_to_dwp,
    )
    callback_handler = CcdCallbackHandler(
        transformer=transformer,
        validator=validator,
        rule_evaluator=rule_evaluator,
        event_selector=event_selector,
        case_data_handler=case_data_handler,
        case_type_id=settings.ccd.case_type_id,
    )
    return Handlers(
        callback_handler=callback_handler,
        case_data_handler=case_data_handler,
        rule_evaluator=rule_evaluator,
        dwp_lookup=dwp_lookup,
        venue_lookup=venue_lookup,
    )
