"""
Error types and the FastAPI handlers that turn them into responses.

Client-facing bodies keep FastAPI's `{"detail": ...}` shape. Store failures
never expose their cause; the classification only goes to the logs.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_DETAIL = "Internal server error."


class StoreError(RuntimeError):
    """
    A statement failed inside the data store layer.

    `kind` is one of:
    - "connectivity": the pool or server could not be reached
    - "constraint": the store rejected a row (unique/not-null/check/fk)
    - "statement": any other error reported by PostgreSQL
    """

    def __init__(self, kind: str, operation: str, cause: BaseException | None = None) -> None:
        super().__init__(f"{operation} failed ({kind})")
        self.kind = kind
        self.operation = operation
        self.cause = cause


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Missing/malformed body fields are client errors (400), not FastAPI's default 422.
    logger.warning("validation_failed path=%s errors=%s", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error(
        "store_failure kind=%s operation=%s path=%s",
        exc.kind,
        exc.operation,
        request.url.path,
        exc_info=exc.cause or exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_error path=%s", request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": INTERNAL_ERROR_DETAIL},
    )
