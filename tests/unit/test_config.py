"""Tests for configuration defaults and env overrides."""

from __future__ import annotations

from sscs_bulkscan.core.config import AppSettings, CaseEventConfig, CcdConfig, ReferenceDataConfig


def test_default_settings():
    settings = AppSettings()
    assert settings.environment == "dev"
    assert settings.ccd.case_type_id == "Benefit"
    assert settings.reference.source == "file"


def test_case_event_defaults():
    events = CaseEventConfig()
    assert events.incomplete_application == "incompleteApplication"
    assert events.non_compliant == "nonCompliant"
    assert events.valid_appeal_created == "validAppealCreated"
    assert events.send_to_dwp == "sendToDwp"


def test_ready_to_list_offices_default():
    offices = ReferenceDataConfig().ready_to_list_offices
    assert "3" in offices
    assert "Balham DRT" in offices
    assert "Inverness DRT" not in offices


def test_ccd_env_override(monkeypatch):
    monkeypatch.setenv("SSCS_CCD_BASE_URL", "http://ccd-data-store:4452")
    monkeypatch.setenv("SSCS_CCD_TIMEOUT", "5")
    config = CcdConfig()
    assert config.base_url == "http://ccd-data-store:4452"
    assert config.timeout == 5


def test_event_env_override(monkeypatch):
    monkeypatch.setenv("SSCS_EVENT_INCOMPLETE_APPLICATION", "incompleteApplicationReceived")
    assert CaseEventConfig().incomplete_application == "incompleteApplicationReceived"


def test_ready_to_list_offices_from_json_env(monkeypatch):
    monkeypatch.setenv("SSCS_REFERENCE_READY_TO_LIST_OFFICES", '["1", "Balham DRT"]')
    assert ReferenceDataConfig().ready_to_list_offices == ["1", "Balham DRT"]
