"""Global exception handlers: map store errors and body validation to HTTP responses."""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from recipes_api.app.domain.errors import (
    MalformedRecipeError,
    StorageFaultError,
    StoreNotReadyError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(StorageFaultError)
    async def storage_fault_handler(request: Request, exc: StorageFaultError):
        logger.error("Storage fault on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Storage unavailable"},
        )

    @app.exception_handler(MalformedRecipeError)
    async def malformed_record_handler(request: Request, exc: MalformedRecipeError):
        logger.error("Undecodable stored recipe on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Stored recipe could not be read"},
        )

    @app.exception_handler(StoreNotReadyError)
    async def store_not_ready_handler(request: Request, exc: StoreNotReadyError):
        logger.error("Request on %s before store was loaded", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc)},
        )
