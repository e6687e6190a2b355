"""Bulk-scan and CCD callback endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Header, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from sscs_bulkscan.handlers.wiring import Handlers
from sscs_bulkscan.models.case import Callback, ExceptionCaseData, ExceptionRecord, Token

router = APIRouter(tags=["callbacks"])

# The handler chain calls the blocking CCD client, so these routes are plain
# functions and run in the threadpool.


class CreateCaseRequest(BaseModel):
    exception_record: ExceptionRecord
    exception_case_data: ExceptionCaseData = Field(default_factory=ExceptionCaseData)


def _handlers(request: Request) -> Handlers:
    return request.app.state.handlers


def _token(authorization: str, service_authorization: str, user_id: str) -> Token:
    return Token(user_auth_token=authorization, service_auth_token=service_authorization, user_id=user_id)


@router.post("/validate-record")
def validate_record(request: Request, exception_record: ExceptionRecord) -> dict[str, Any]:
    """Transform and validate only; nothing is written to CCD."""
    handlers = _handlers(request)
    response = handlers.callback_handler.handle_validation(exception_record)
    status = handlers.rule_evaluator.validation_status(response.errors, response.warnings)
    return {
        "status": status.value,
        "errors": response.errors or [],
        "warnings": response.warnings or [],
    }


@router.post("/transform-exception-record")
def transform_exception_record(request: Request, exception_record: ExceptionRecord) -> JSONResponse:
    response = _handlers(request).callback_handler.handle(exception_record)
    return JSONResponse(content=response.model_dump(mode="json", by_alias=True, exclude_none=True))


@router.post("/exception-record/create-case")
def create_case(
    request: Request,
    body: CreateCaseRequest,
    ignore_warnings: bool = False,
    authorization: str = Header(),
    service_authorization: str = Header(alias="ServiceAuthorization"),
    user_id: str = Header(alias="user-id"),
) -> JSONResponse:
    token = _token(authorization, service_authorization, user_id)
    result, warnings = _handlers(request).callback_handler.handle_and_create(
        body.exception_record, body.exception_case_data, ignore_warnings, token
    )
    if result is None:
        return JSONResponse(status_code=422, content={"errors": [], "warnings": warnings})
    return JSONResponse(content={"state": result.state, "caseId": result.case_id})


@router.post("/validate")
def validate_case(
    request: Request,
    callback: Callback,
    authorization: str = Header(),
    service_authorization: str = Header(alias="ServiceAuthorization"),
    user_id: str = Header(alias="user-id"),
) -> dict[str, Any]:
    """CCD about-to-submit callback for a case that already exists."""
    token = _token(authorization, service_authorization, user_id)
    response = _handlers(request).callback_handler.handle_validation_and_update(callback, token)
    return {
        "data": response.data.to_ccd(),
        "errors": response.errors,
        "warnings": response.warnings,
    }
