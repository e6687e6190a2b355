"""CCD data-store client implementing ICaseStore.

Every call is synchronous. HTTP and transport failures surface as
``httpx.HTTPError`` subclasses and are never wrapped.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from sscs_bulkscan.core.types import CaseId, JsonDict, SearchCriteria
from sscs_bulkscan.models.case import CaseRecord, Token

logger = logging.getLogger(__name__)

CREATE_SUMMARY = "SSCS - new case created"
CREATE_DESCRIPTION = "Created SSCS case from exception record"


class CcdCaseStore:
    """Production ICaseStore backed by the CCD data-store REST API."""

    def __init__(self, base_url: str, jurisdiction: str = "SSCS", case_type_id: str = "Benefit",
                 timeout: int = 30, client: httpx.Client | None = None) -> None:
        self._jurisdiction = jurisdiction
        self._case_type_id = case_type_id
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        self._client.close()

    # ---- helpers ----

    def _cases_path(self, token: Token) -> str:
        return (
            f"/caseworkers/{token.user_id}/jurisdictions/{self._jurisdiction}"
            f"/case-types/{self._case_type_id}/cases"
        )

    @staticmethod
    def _headers(token: Token) -> dict[str, str]:
        return {
            "Authorization": token.user_auth_token,
            "ServiceAuthorization": token.service_auth_token,
            "Content-Type": "application/json",
        }

    def _start_event(self, path: str, token: Token) -> str:
        r = self._client.get(path, headers=self._headers(token))
        r.raise_for_status()
        return r.json()["token"]

    @staticmethod
    def _content(record: CaseRecord, event_id: str, event_token: str,
                 summary: str, description: str) -> dict[str, Any]:
        return {
            "data": record.to_ccd(),
            "event": {"id": event_id, "summary": summary, "description": description},
            "event_token": event_token,
            "ignore_warning": True,
        }

    # ---- ICaseStore methods ----

    def find_case_by(self, criteria: SearchCriteria, token: Token) -> list[JsonDict]:
        r = self._client.get(self._cases_path(token), params=criteria, headers=self._headers(token))
        r.raise_for_status()
        return r.json() or []

    def create_case(self, record: CaseRecord, token: Token, event_id: str) -> CaseId:
        base = (
            f"/caseworkers/{token.user_id}/jurisdictions/{self._jurisdiction}"
            f"/case-types/{self._case_type_id}"
        )
        event_token = self._start_event(f"{base}/event-triggers/{event_id}/token", token)
        r = self._client.post(
            f"{base}/cases",
            json=self._content(record, event_id, event_token, CREATE_SUMMARY, CREATE_DESCRIPTION),
            headers=self._headers(token),
        )
        r.raise_for_status()
        case_id = int(r.json()["id"])
        logger.debug("CCD created case %s with event %s", case_id, event_id)
        return case_id

    def update_case(self, record: CaseRecord, token: Token, event_id: str, case_id: int,
                    summary: str, description: str) -> None:
        case_path = f"{self._cases_path(token)}/{case_id}"
        event_token = self._start_event(f"{case_path}/event-triggers/{event_id}/token", token)
        r = self._client.post(
            f"{case_path}/events",
            json=self._content(record, event_id, event_token, summary, description),
            headers=self._headers(token),
        )
        r.raise_for_status()
