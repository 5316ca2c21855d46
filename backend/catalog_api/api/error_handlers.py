"""Error Handlers — global exception handlers for the catalog API.

Invariants:
    - CatalogError → {success: false, message} with the error's HTTP status
    - RequestValidationError (malformed/mistyped body) → 400 envelope
    - Routing 404 → 200 endpoint listing; routing 405 → "Method not allowed"
    - Exception (catch-all) → 500 "Internal server error: ...", CORS headers attached here
      because the catch-all runs outside the middleware stack

Design Decisions:
    - Four-layer handler: domain, validation, routing, catch-all
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.api.cors import CORS_HEADERS
from catalog_api.api.endpoints import endpoint_listing
from catalog_api.api.responses import PrettyJSONResponse, error_response
from catalog_api.core.errors import CatalogError, ErrorSeverity, MethodNotAllowedError
from catalog_api.infrastructure.observability import request_extra

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_catalog_error_handler(app)
    _register_validation_error_handler(app)
    _register_routing_error_handler(app)
    _register_generic_error_handler(app)


def _register_catalog_error_handler(app: FastAPI) -> None:

    @app.exception_handler(CatalogError)
    async def catalog_error_handler(request: Request, exc: CatalogError):
        """Handle all catalog domain/infrastructure errors."""
        log = logger.error if exc.severity is not ErrorSeverity.WARNING else logger.warning
        log(
            f"CatalogError: {exc.message}",
            extra=request_extra(
                request, error_code=exc.code, status_code=exc.http_status,
            ),
        )
        return error_response(exc.message, exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.warning(
            f"Validation error: {exc.errors()}", extra=request_extra(request, status_code=400),
        )
        return error_response(_describe_validation_errors(exc))


def _register_routing_error_handler(app: FastAPI) -> None:

    @app.exception_handler(StarletteHTTPException)
    async def routing_error_handler(request: Request, exc: StarletteHTTPException):
        """Unknown paths get the endpoint listing; known paths with the wrong verb get 405."""
        if exc.status_code == status.HTTP_404_NOT_FOUND:
            return PrettyJSONResponse(content=endpoint_listing())
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            err = MethodNotAllowedError(request.method, request.url.path)
            return error_response(err.message, err.http_status, headers=exc.headers)
        return error_response(str(exc.detail), exc.status_code, headers=exc.headers)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra=request_extra(request, status_code=500),
        )
        return error_response(
            f"Internal server error: {exc}",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            headers=CORS_HEADERS,
        )


def _describe_validation_errors(exc: RequestValidationError) -> str:
    details = "; ".join(
        f"{'.'.join(str(loc) for loc in e['loc'])}: {e['msg']}"
        for e in exc.errors()
    )
    return f"Invalid request body: {details}"
