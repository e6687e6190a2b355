"""JSON file backend implementing IReferenceDataSource."""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from sscs_bulkscan.core.exceptions import ReferenceDataError
from sscs_bulkscan.models.reference import ReferenceData

BUNDLED_REFERENCE_DATA = (
    Path(__file__).resolve().parent.parent / "reference" / "data" / "reference_data.json"
)


class FileReferenceDataSource:
    """Reads reference tables from a JSON file (the bundled copy by default)."""

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path else BUNDLED_REFERENCE_DATA

    def load(self) -> ReferenceData:
        try:
            return ReferenceData.model_validate_json(self._path.read_text())
        except (OSError, ValidationError) as exc:
            raise ReferenceDataError(f"Cannot load reference data from {self._path}: {exc}") from exc
