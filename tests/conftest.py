"""Shared fixtures: bundled reference data, settings and a CCD token."""

from __future__ import annotations

import pytest

from sscs_bulkscan.core.config import AppSettings
from sscs_bulkscan.models.case import Token
from sscs_bulkscan.models.reference import ReferenceData
from sscs_bulkscan.persistence.file_backend import FileReferenceDataSource
from sscs_bulkscan.reference.benefit_codes import CaseCodeService
from sscs_bulkscan.reference.dwp_lookup import DwpAddressLookup
from sscs_bulkscan.reference.postcode import PostcodeValidator
from sscs_bulkscan.reference.venue_lookup import VenueLookup
from sscs_bulkscan.rules.evaluator import RuleEvaluator


@pytest.fixture(scope="session")
def reference_data() -> ReferenceData:
    return FileReferenceDataSource().load()


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings()


@pytest.fixture
def token() -> Token:
    return Token(user_auth_token="Bearer user-token", service_auth_token="Bearer s2s-token", user_id="42")


@pytest.fixture
def rule_evaluator(reference_data, settings) -> RuleEvaluator:
    venue_lookup = VenueLookup(reference_data)
    return RuleEvaluator(
        case_codes=CaseCodeService(reference_data),
        dwp_lookup=DwpAddressLookup(reference_data),
        venue_lookup=venue_lookup,
        postcode_validator=PostcodeValidator(venue_lookup),
        ready_to_list_offices=settings.reference.ready_to_list_offices,
    )
