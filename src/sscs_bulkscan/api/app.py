"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from sscs_bulkscan.api.routes import admin, callbacks, health
from sscs_bulkscan.core.config import AppSettings
from sscs_bulkscan.core.exceptions import CaseDataHelperError, InvalidExceptionRecordError
from sscs_bulkscan.core.logging_config import configure_logging
from sscs_bulkscan.core.protocols import ICaseStore, ICaseTransformer, ICaseValidator
from sscs_bulkscan.handlers.wiring import build_handlers
from sscs_bulkscan.models.reference import ReferenceData
from sscs_bulkscan.persistence import create_persistence, load_reference_data


def create_app(
    *,
    transformer: ICaseTransformer,
    validator: ICaseValidator,
    settings: AppSettings | None = None,
    case_store: ICaseStore | None = None,
    reference_data: ReferenceData | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    The form transformer and the business-rule validator are external
    collaborators and must be supplied. The CCD client and reference data
    are built from settings unless injected.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        app_settings = settings or AppSettings()
        configure_logging(app_settings.log_level)

        owned_store = None
        store, ref_data = case_store, reference_data
        if store is None:
            owned_store, loaded = create_persistence(app_settings)
            store, ref_data = owned_store, ref_data or loaded
        elif ref_data is None:
            ref_data = load_reference_data(app_settings)

        app.state.settings = app_settings
        app.state.handlers = build_handlers(
            settings=app_settings,
            reference_data=ref_data,
            case_store=store,
            transformer=transformer,
            validator=validator,
        )
        yield
        if owned_store is not None:
            owned_store.close()

    app = FastAPI(
        title="SSCS Bulk Scan Callback Handlers",
        version="0.1.0",
        lifespan=lifespan,
    )

    @app.exception_handler(InvalidExceptionRecordError)
    async def invalid_exception_record(request: Request, exc: InvalidExceptionRecordError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"errors": exc.errors, "warnings": []})

    @app.exception_handler(CaseDataHelperError)
    async def case_data_helper_error(request: Request, exc: CaseDataHelperError) -> JSONResponse:
        return JSONResponse(status_code=500, content={
            "errors": [f"Could not create case for exception record {exc.exception_record_id}"],
            "warnings": [],
        })

    @app.exception_handler(httpx.HTTPError)
    async def case_store_unavailable(request: Request, exc: httpx.HTTPError) -> JSONResponse:
        return JSONResponse(status_code=502, content={
            "errors": [f"Case store request failed: {exc.__class__.__name__}"],
            "warnings": [],
        })

    app.include_router(health.router)
    app.include_router(callbacks.router)
    app.include_router(admin.router, prefix="/admin")
    return app
