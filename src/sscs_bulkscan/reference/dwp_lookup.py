"""DWP issuing office lookups."""

from __future__ import annotations

from sscs_bulkscan.models.reference import OfficeMapping, ReferenceData


class DwpAddressLookup:
    """Resolves an issuing office to its mapping and regional centre."""

    def __init__(self, reference_data: ReferenceData) -> None:
        self._offices = {k.lower(): v for k, v in reference_data.offices.items()}

    def office_mapping(self, benefit_type: str, office: str) -> OfficeMapping | None:
        if not benefit_type or not office:
            return None
        for mapping in self._offices.get(benefit_type.strip().lower(), []):
            if mapping.matches(office):
                return mapping
        return None

    def regional_centre(self, benefit_type: str, office: str) -> str | None:
        mapping = self.office_mapping(benefit_type, office)
        return mapping.regional_centre if mapping is not None else None
