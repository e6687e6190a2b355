"""UK postcode validation."""

from __future__ import annotations

import re

from sscs_bulkscan.reference.venue_lookup import VenueLookup, outcode_of

# Outward code (area + district) then inward code (sector + unit).
POSTCODE_PATTERN = re.compile(
    r"^(GIR ?0AA|[A-PR-UWYZ]([0-9]{1,2}|[A-HK-Y][0-9]([0-9ABEHMNPRV-Y])?|[0-9][A-HJKPS-UW]) ?[0-9][ABD-HJLNP-UW-Z]{2})$",
    re.IGNORECASE,
)


class PostcodeValidator:
    """Format check, then existence check against known outcodes."""

    def __init__(self, venue_lookup: VenueLookup) -> None:
        self._venues = venue_lookup

    def is_valid_postcode_format(self, postcode: str | None) -> bool:
        if not postcode:
            return False
        return POSTCODE_PATTERN.match(postcode.strip()) is not None

    def is_valid(self, postcode: str | None) -> bool:
        if not postcode:
            return False
        return self._venues.knows_outcode(outcode_of(postcode))
