"""Error Handlers — global exception handlers for the catalog API.

Invariants:
    - CatalogError escaping a route → its own status and to_response() body
    - RequestValidationError (malformed JSON, wrong types, bad path id) → 400 with
      the same {field: message, "status": "400"} shape as domain validation
    - Exception (catch-all) → 500, never leaks internal details

Design Decisions:
    - Three-layer handler: domain (CatalogError), validation (Pydantic), catch-all (Exception)
    - Normal failures travel as Result values and never reach these handlers;
      they cover what escapes outside a route's control (dependencies, decoding)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from catalog.core.errors import CatalogError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_catalog_error_handler(app: FastAPI) -> None:
    """Register catalog domain/infrastructure error handler."""

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle catalog errors raised outside the Result flow."""
        logger.error(
            f"CatalogError: {exc.message}",
            extra={**exc.log_extra(), "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "message": "An unexpected error occurred",
                "status": str(status.HTTP_500_INTERNAL_SERVER_ERROR),
            },
        )


def _error_field(loc: tuple) -> str:
    """Field name for an error location; JSON decode offsets map to its section."""
    if isinstance(loc[-1], int):
        return str(loc[0])
    return str(loc[-1])


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build {field: message} body; first message per field wins."""
    body: dict[str, str] = {}
    for e in exc.errors():
        body.setdefault(_error_field(e.get("loc") or ("body",)), e["msg"])
    body["status"] = str(status.HTTP_400_BAD_REQUEST)
    return body
