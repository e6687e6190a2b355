"""Tests for RuleEvaluator derived-field stamping."""

from __future__ import annotations

import pytest

from sscs_bulkscan.core.exceptions import BenefitMappingError
from sscs_bulkscan.models.appeal import Address, Appellant, Appointee, BenefitType
from sscs_bulkscan.models.case import CaseRecord
from sscs_bulkscan.models.events import ValidationStatus
from tests.fakes import build_appeal

DOCUMENTS = [{"value": {"documentType": "sscs1", "fileName": "form.pdf"}}]


class TestAddSscsDataToMap:
    def test_pip_office_three(self, rule_evaluator):
        record = CaseRecord()
        appeal = build_appeal(benefit="PIP", office="3")
        rule_evaluator.add_sscs_data_to_map(record, appeal, DOCUMENTS, {"appellantSubscription": {}}, "SSCS1")

        assert record.appeal is appeal
        assert record.benefit_code == "002"
        assert record.issue_code == "DD"
        assert record.case_code == "002DD"
        assert record.dwp_regional_centre == "Springburn"
        assert record.created_in_gaps_from == "readyToList"
        assert record.evidence_present == "Yes"
        assert record.form_type == "SSCS1"
        assert record.subscriptions == {"appellantSubscription": {}}

    def test_esa_balham(self, rule_evaluator):
        record = CaseRecord()
        rule_evaluator.add_sscs_data_to_map(record, build_appeal(benefit="ESA", office="Balham DRT"),
                                            None, None, None)
        assert record.benefit_code == "051"
        assert record.case_code == "051DD"
        assert record.dwp_regional_centre == "Balham"
        assert record.created_in_gaps_from == "readyToList"
        assert record.evidence_present == "No"

    def test_office_outside_ready_to_list_goes_to_valid_appeal(self, rule_evaluator):
        record = CaseRecord()
        rule_evaluator.add_sscs_data_to_map(record, build_appeal(benefit="ESA", office="Inverness DRT"),
                                            None, None, None)
        assert record.dwp_regional_centre == "Inverness"
        assert record.created_in_gaps_from == "validAppeal"

    def test_unknown_office_has_no_regional_centre(self, rule_evaluator):
        record = CaseRecord()
        rule_evaluator.add_sscs_data_to_map(record, build_appeal(office="99"), None, None, None)
        assert record.dwp_regional_centre is None
        assert record.created_in_gaps_from == "validAppeal"

    def test_unmapped_benefit_raises_when_strict(self, rule_evaluator):
        with pytest.raises(BenefitMappingError):
            rule_evaluator.add_sscs_data_to_map(CaseRecord(), build_appeal(benefit="XYZ"), None, None, None)

    def test_unmapped_benefit_leaves_codes_unset_when_not_strict(self, rule_evaluator):
        record = CaseRecord(benefit_code="002", issue_code="DD", case_code="002DD")
        rule_evaluator.add_sscs_data_to_map(record, build_appeal(benefit="XYZ"), None, None, None, strict=False)
        assert record.benefit_code is None
        assert record.issue_code is None
        assert record.case_code is None

    def test_no_benefit_type(self, rule_evaluator):
        record = CaseRecord()
        rule_evaluator.add_sscs_data_to_map(record, build_appeal(benefit=None), None, None, None)
        assert record.benefit_code is None
        assert record.created_in_gaps_from is None

    def test_no_appeal(self, rule_evaluator):
        record = CaseRecord()
        rule_evaluator.add_sscs_data_to_map(record, None, DOCUMENTS, None, "SSCS1")
        assert record.appeal is None
        assert record.evidence_present == "Yes"
        assert record.created_in_gaps_from is None


class TestSetUnsavedFields:
    def test_stamps_codes_and_venue(self, rule_evaluator):
        case_data = CaseRecord(appeal=build_appeal(benefit="PIP", office="3", postcode="SW12 9AB"))
        rule_evaluator.set_unsaved_fields(case_data)

        assert case_data.created_in_gaps_from == "readyToList"
        assert case_data.evidence_present == "No"
        assert case_data.case_code == "002DD"
        assert case_data.dwp_regional_centre == "Springburn"
        assert case_data.processing_venue == "Sutton"

    def test_created_in_gaps_from_is_always_ready_to_list(self, rule_evaluator):
        case_data = CaseRecord(appeal=build_appeal(benefit="ESA", office="Inverness DRT"))
        rule_evaluator.set_unsaved_fields(case_data)
        assert case_data.created_in_gaps_from == "readyToList"

    def test_unmapped_benefit_is_not_fatal(self, rule_evaluator):
        case_data = CaseRecord(appeal=build_appeal(benefit="XYZ", office="3"))
        rule_evaluator.set_unsaved_fields(case_data)
        assert case_data.benefit_code is None
        assert case_data.case_code is None
        assert case_data.created_in_gaps_from == "readyToList"

    def test_blank_benefit_skips_derived_fields(self, rule_evaluator):
        case_data = CaseRecord(appeal=build_appeal(benefit="  ", office="3"))
        rule_evaluator.set_unsaved_fields(case_data)
        assert case_data.benefit_code is None
        assert case_data.dwp_regional_centre is None
        assert case_data.processing_venue is None

    def test_unknown_postcode_keeps_existing_venue(self, rule_evaluator):
        case_data = CaseRecord(appeal=build_appeal(postcode="EH1 1AA"), processing_venue="Leeds")
        rule_evaluator.set_unsaved_fields(case_data)
        assert case_data.processing_venue == "Leeds"


class TestFindProcessingVenue:
    def test_appointee_postcode_wins(self, rule_evaluator):
        appellant = Appellant(
            address=Address(postcode="SW12 9AB"),
            appointee=Appointee(address=Address(postcode="G21 1AA")),
        )
        assert rule_evaluator.find_processing_venue(appellant, BenefitType(code="PIP")) == "Glasgow"

    def test_invalid_appointee_postcode_falls_back_to_appellant(self, rule_evaluator):
        appellant = Appellant(
            address=Address(postcode="G21 1AA"),
            appointee=Appointee(address=Address(postcode="EH1 1AA")),
        )
        assert rule_evaluator.find_processing_venue(appellant, BenefitType(code="PIP")) == "Glasgow"

    def test_esa_venue(self, rule_evaluator):
        appellant = Appellant(address=Address(postcode="SW12 9AB"))
        assert rule_evaluator.find_processing_venue(appellant, BenefitType(code="ESA")) == "Fox Court"

    def test_no_valid_postcode(self, rule_evaluator):
        appellant = Appellant(address=Address(postcode="not a postcode"))
        assert rule_evaluator.find_processing_venue(appellant, BenefitType(code="PIP")) is None
        assert rule_evaluator.find_processing_venue(None, BenefitType(code="PIP")) is None


@pytest.mark.parametrize("errors,warnings,expected", [
    (["e"], ["w"], ValidationStatus.ERRORS),
    (None, ["w"], ValidationStatus.WARNINGS),
    ([], [], ValidationStatus.SUCCESS),
    (None, None, ValidationStatus.SUCCESS),
])
def test_validation_status(errors, warnings, expected, rule_evaluator):
    assert rule_evaluator.validation_status(errors, warnings) is expected
