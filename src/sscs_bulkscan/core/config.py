"""Application configuration using pydantic-settings with grouped env prefixes."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class CcdConfig(BaseSettings):
    """CCD data-store API configuration."""

    model_config = {"env_prefix": "SSCS_CCD_"}

    base_url: str = "http://localhost:4452"
    jurisdiction: str = "SSCS"
    case_type_id: str = "Benefit"
    timeout: int = 30


class CaseEventConfig(BaseSettings):
    """Event ids fired against CCD when a case is created or progressed."""

    model_config = {"env_prefix": "SSCS_EVENT_"}

    case_created: str = "appealCreated"
    incomplete_application: str = "incompleteApplication"
    non_compliant: str = "nonCompliant"
    valid_appeal_created: str = "validAppealCreated"
    send_to_dwp: str = "sendToDwp"


class ReferenceDataConfig(BaseSettings):
    """Office, venue and benefit-code reference tables."""

    model_config = {"env_prefix": "SSCS_REFERENCE_"}

    source: Literal["file", "dynamodb"] = "file"
    path: str | None = None  # None means the bundled reference_data.json
    table_name: str = "sscs-reference-data"
    table_suffix: str = ""  # "-dev", "-uat", or "" for prod
    region: str = "eu-west-2"
    endpoint_url: str | None = None  # LocalStack override
    ready_to_list_offices: list[str] = [
        "1", "2", "3", "4", "5", "6", "7", "8", "9", "10", "11",
        "Balham DRT", "Sheffield DRT",
    ]


class AppSettings(BaseSettings):
    """Root application settings aggregating all sub-configs."""

    model_config = {"env_prefix": "SSCS_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "INFO"

    ccd: CcdConfig = CcdConfig()
    events: CaseEventConfig = CaseEventConfig()
    reference: ReferenceDataConfig = ReferenceDataConfig()
