"""Admin endpoints for inspecting the loaded reference data."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

router = APIRouter(tags=["admin"])


@router.get("/offices/{benefit_type}/{office}")
async def get_office(request: Request, benefit_type: str, office: str) -> dict:
    """Return the office mapping and regional centre for an issuing office."""
    mapping = request.app.state.handlers.dwp_lookup.office_mapping(benefit_type, office)
    if mapping is None:
        raise HTTPException(status_code=404, detail=f"No {benefit_type} office {office!r}")
    return {"benefit_type": benefit_type, "office": mapping.code, "regional_centre": mapping.regional_centre}


@router.get("/venues/{postcode}")
async def get_venue(request: Request, postcode: str, benefit_type: str | None = None) -> dict:
    """Return the hearing venue a postcode routes to."""
    venue = request.app.state.handlers.venue_lookup.venue_for_postcode(postcode, benefit_type)
    return {"postcode": postcode, "venue": venue}
