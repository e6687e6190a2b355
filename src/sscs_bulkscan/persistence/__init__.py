"""Pluggable persistence backends behind Protocol interfaces."""

from __future__ import annotations

from sscs_bulkscan.core.config import AppSettings
from sscs_bulkscan.core.protocols import IReferenceDataSource
from sscs_bulkscan.models.reference import ReferenceData
from sscs_bulkscan.persistence.ccd_client import CcdCaseStore
from sscs_bulkscan.persistence.dynamodb_backend import DynamoDBReferenceDataSource
from sscs_bulkscan.persistence.file_backend import FileReferenceDataSource


def load_reference_data(settings: AppSettings | None = None) -> ReferenceData:
    """Load the reference tables once from the configured source."""
    if settings is None:
        settings = AppSettings()
    ref = settings.reference

    source: IReferenceDataSource
    if ref.source == "dynamodb":
        source = DynamoDBReferenceDataSource(
            table_name=ref.table_name,
            table_suffix=ref.table_suffix,
            region=ref.region,
            endpoint_url=ref.endpoint_url,
        )
    else:
        source = FileReferenceDataSource(ref.path)
    return source.load()


def create_persistence(settings: AppSettings | None = None):
    """Create wired-up persistence backends from application settings.

    Returns:
        Tuple of (case_store, reference_data).
    """
    if settings is None:
        settings = AppSettings()

    case_store = CcdCaseStore(
        base_url=settings.ccd.base_url,
        jurisdiction=settings.ccd.jurisdiction,
        case_type_id=settings.ccd.case_type_id,
        timeout=settings.ccd.timeout,
    )

    return case_store, load_reference_data(settings)
