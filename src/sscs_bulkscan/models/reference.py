"""Reference tables loaded from file or DynamoDB at startup."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class OfficeMapping(BaseModel):
    """A DWP issuing office and the regional centre that handles it."""

    code: str
    regional_centre: str
    aliases: list[str] = Field(default_factory=list)  # e.g. "DWP PIP (3)"

    def matches(self, office: str) -> bool:
        wanted = office.strip().lower()
        return wanted == self.code.lower() or wanted in (a.lower() for a in self.aliases)


class VenueEntry(BaseModel):
    """Hearing venue for a postcode outcode."""

    outcode: str
    venue: str
    esa_venue: Optional[str] = None  # ESA and UC list at a different venue


class ReferenceData(BaseModel):
    """Read-only lookup tables shared across all requests."""

    benefit_codes: dict[str, str] = Field(default_factory=dict)
    offices: dict[str, list[OfficeMapping]] = Field(default_factory=dict)
    venues: list[VenueEntry] = Field(default_factory=list)
    default_venue: Optional[str] = None

    model_config = {"frozen": True}
