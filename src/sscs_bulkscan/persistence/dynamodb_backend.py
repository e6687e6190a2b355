"""DynamoDB backend implementing IReferenceDataSource.

Table layout (single table, PK/SK):
    BENEFIT#{code} / CODE            -> benefitCode
    BENEFIT#{code} / OFFICE#{office} -> regionalCentre, aliases
    VENUE          / OUTCODE#{code}  -> venue, esaVenue
    VENUE          / DEFAULT         -> venue
"""

from __future__ import annotations

from typing import Any

import boto3
from botocore.exceptions import ClientError

from sscs_bulkscan.core.exceptions import ReferenceDataError
from sscs_bulkscan.models.reference import OfficeMapping, ReferenceData, VenueEntry


class DynamoDBReferenceDataSource:
    """Production IReferenceDataSource backed by a DynamoDB table."""

    def __init__(self, table_name: str = "sscs-reference-data", table_suffix: str = "",
                 region: str = "eu-west-2", endpoint_url: str | None = None) -> None:
        self._table_name = f"{table_name}{table_suffix}"
        self._region = region
        self._endpoint_url = endpoint_url
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._ddb = boto3.resource("dynamodb", **kwargs)

    def _scan_all(self) -> list[dict[str, Any]]:
        """Read every item, following pagination."""
        tbl = self._ddb.Table(self._table_name)
        items: list[dict[str, Any]] = []
        kwargs: dict[str, Any] = {}
        while True:
            resp = tbl.scan(**kwargs)
            items.extend(resp.get("Items", []))
            last_key = resp.get("LastEvaluatedKey")
            if not last_key:
                return items
            kwargs["ExclusiveStartKey"] = last_key

    def load(self) -> ReferenceData:
        try:
            items = self._scan_all()
        except ClientError as exc:
            raise ReferenceDataError(
                f"Reference data scan failed for table {self._table_name!r}: {exc}"
            ) from exc

        benefit_codes: dict[str, str] = {}
        offices: dict[str, list[OfficeMapping]] = {}
        venues: list[VenueEntry] = []
        default_venue: str | None = None

        for item in items:
            pk, sk = item["PK"], item["SK"]
            if pk.startswith("BENEFIT#"):
                benefit = pk.removeprefix("BENEFIT#")
                if sk == "CODE":
                    benefit_codes[benefit] = item["benefitCode"]
                elif sk.startswith("OFFICE#"):
                    offices.setdefault(benefit, []).append(OfficeMapping(
                        code=sk.removeprefix("OFFICE#"),
                        regional_centre=item["regionalCentre"],
                        aliases=list(item.get("aliases", [])),
                    ))
            elif pk == "VENUE":
                if sk == "DEFAULT":
                    default_venue = item["venue"]
                elif sk.startswith("OUTCODE#"):
                    venues.append(VenueEntry(
                        outcode=sk.removeprefix("OUTCODE#"),
                        venue=item["venue"],
                        esa_venue=item.get("esaVenue"),
                    ))

        if not benefit_codes:
            raise ReferenceDataError(f"No benefit codes found in table {self._table_name!r}")

        return ReferenceData(
            benefit_codes=benefit_codes,
            offices=offices,
            venues=sorted(venues, key=lambda v: v.outcode),
            default_venue=default_venue,
        )
