"""Seed the DynamoDB reference-data table from the bundled reference data.

Usage:
    python scripts/seed_dynamodb.py --endpoint-url http://localhost:4566
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

import boto3

TABLE_NAME = "sscs-reference-data"

SEED_PATH = (
    Path(__file__).resolve().parent.parent
    / "src" / "sscs_bulkscan" / "reference" / "data" / "reference_data.json"
)


def create_tables(ddb: Any, suffix: str = "") -> None:
    """Create the reference-data table. Skips if it already exists."""
    client = ddb.meta.client
    existing = client.list_tables().get("TableNames", [])

    table_name = f"{TABLE_NAME}{suffix}"
    if table_name in existing:
        print(f"  Table {table_name} already exists, skipping")
        return
    client.create_table(
        TableName=table_name,
        KeySchema=[
            {"AttributeName": "PK", "KeyType": "HASH"},
            {"AttributeName": "SK", "KeyType": "RANGE"},
        ],
        AttributeDefinitions=[
            {"AttributeName": "PK", "AttributeType": "S"},
            {"AttributeName": "SK", "AttributeType": "S"},
        ],
        BillingMode="PAY_PER_REQUEST",
    )
    print(f"  Created table {table_name}")


def reference_items(data: dict[str, Any]) -> list[dict[str, Any]]:
    """Flatten the reference JSON into PK/SK items."""
    items: list[dict[str, Any]] = []
    for benefit, code in data["benefit_codes"].items():
        items.append({"PK": f"BENEFIT#{benefit}", "SK": "CODE", "benefitCode": code})

    for benefit, mappings in data.get("offices", {}).items():
        for mapping in mappings:
            item = {
                "PK": f"BENEFIT#{benefit}",
                "SK": f"OFFICE#{mapping['code']}",
                "regionalCentre": mapping["regional_centre"],
            }
            if mapping.get("aliases"):
                item["aliases"] = mapping["aliases"]
            items.append(item)

    for venue in data.get("venues", []):
        item = {"PK": "VENUE", "SK": f"OUTCODE#{venue['outcode']}", "venue": venue["venue"]}
        if venue.get("esa_venue"):
            item["esaVenue"] = venue["esa_venue"]
        items.append(item)

    if data.get("default_venue"):
        items.append({"PK": "VENUE", "SK": "DEFAULT", "venue": data["default_venue"]})
    return items


def seed_reference_data(ddb: Any, suffix: str = "", seed_path: Path = SEED_PATH) -> int:
    """Load reference_data.json into the table. Returns the item count."""
    data = json.loads(seed_path.read_text())
    items = reference_items(data)

    tbl = ddb.Table(f"{TABLE_NAME}{suffix}")
    with tbl.batch_writer() as batch:
        for item in items:
            batch.put_item(Item=item)
    print(f"  Seeded {len(items)} reference data items")
    return len(items)


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed the SSCS reference data table")
    parser.add_argument("--endpoint-url", default=None, help="DynamoDB endpoint (e.g. http://localhost:4566)")
    parser.add_argument("--table-suffix", default="", help="Table name suffix (e.g. -dev)")
    parser.add_argument("--region", default="eu-west-2", help="AWS region")
    args = parser.parse_args()

    kwargs: dict[str, Any] = {"region_name": args.region}
    if args.endpoint_url:
        kwargs["endpoint_url"] = args.endpoint_url

    ddb = boto3.resource("dynamodb", **kwargs)

    print("Creating tables...")
    create_tables(ddb, suffix=args.table_suffix)

    print("Seeding data...")
    seed_reference_data(ddb, suffix=args.table_suffix)

    print("Done!")


if __name__ == "__main__":
    main()
