"""Tests for benefit, issue and case code generation."""

from __future__ import annotations

import pytest

from sscs_bulkscan.core.exceptions import BenefitMappingError
from sscs_bulkscan.reference.benefit_codes import CaseCodeService


@pytest.fixture
def service(reference_data):
    return CaseCodeService(reference_data)


class TestGenerateBenefitCode:
    @pytest.mark.parametrize("benefit,expected", [("PIP", "002"), ("ESA", "051"), ("UC", "001"), ("DLA", "037")])
    def test_known_benefits(self, service, benefit, expected):
        lookup = service.generate_benefit_code(benefit)
        assert lookup.ok
        assert lookup.unwrap() == expected

    def test_case_insensitive(self, service):
        assert service.generate_benefit_code("pip").value == "002"

    def test_unknown_benefit_is_an_error_value(self, service):
        lookup = service.generate_benefit_code("XYZ")
        assert not lookup.ok
        assert lookup.value is None
        with pytest.raises(BenefitMappingError, match="XYZ"):
            lookup.unwrap()

    def test_missing_benefit(self, service):
        assert not service.generate_benefit_code(None).ok
        assert not service.generate_benefit_code("").ok


def test_issue_code_is_constant():
    assert CaseCodeService.generate_issue_code() == "DD"


def test_case_code_concatenates():
    assert CaseCodeService.generate_case_code("002", "DD") == "002DD"
