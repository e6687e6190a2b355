"""Postcode to hearing venue lookup."""

from __future__ import annotations

from sscs_bulkscan.models.reference import ReferenceData, VenueEntry

ESA_VENUE_BENEFITS = frozenset({"esa", "uc"})


def outcode_of(postcode: str) -> str:
    """Outward part of a UK postcode: everything before the 3-char inward code."""
    compact = postcode.replace(" ", "").upper()
    return compact[:-3] if len(compact) > 3 else compact


class VenueLookup:
    def __init__(self, reference_data: ReferenceData) -> None:
        self._venues: dict[str, VenueEntry] = {v.outcode.upper(): v for v in reference_data.venues}
        self._default = reference_data.default_venue

    def knows_outcode(self, outcode: str) -> bool:
        return outcode.upper() in self._venues

    def venue_for_postcode(self, postcode: str, benefit_type: str | None) -> str | None:
        entry = self._venues.get(outcode_of(postcode))
        if entry is None:
            return self._default
        if entry.esa_venue and benefit_type and benefit_type.lower() in ESA_VENUE_BENEFITS:
            return entry.esa_venue
        return entry.venue
