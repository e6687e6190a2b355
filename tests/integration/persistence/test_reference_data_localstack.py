"""Integration tests for DynamoDBReferenceDataSource against LocalStack."""

from __future__ import annotations

import pytest

from sscs_bulkscan.persistence.dynamodb_backend import DynamoDBReferenceDataSource
from sscs_bulkscan.reference.dwp_lookup import DwpAddressLookup
from tests.integration.conftest import LOCALSTACK_URL, REGION, skip_no_localstack


@skip_no_localstack
class TestDynamoDBIntegration:
    @pytest.fixture
    def data(self, seeded_tables):
        return DynamoDBReferenceDataSource(
            table_suffix=seeded_tables,
            region=REGION,
            endpoint_url=LOCALSTACK_URL,
        ).load()

    def test_benefit_codes_from_seed(self, data):
        assert data.benefit_codes["PIP"] == "002"
        assert data.benefit_codes["ESA"] == "051"

    def test_pip_offices(self, data):
        assert len(data.offices["PIP"]) == 11

    def test_regional_centre_lookup(self, data):
        assert DwpAddressLookup(data).regional_centre("PIP", "DWP PIP (3)") == "Springburn"

    def test_default_venue(self, data):
        assert data.default_venue == "Birmingham"
