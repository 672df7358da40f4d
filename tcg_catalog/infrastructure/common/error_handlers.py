"""Global exception handlers translating errors into ErrorResponse bodies."""

from http import HTTPStatus

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tcg_catalog.domain.common.exceptions import (
    DomainError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from tcg_catalog.infrastructure.common.schemas.response_wrappers import ErrorResponse

logger = structlog.get_logger(__name__)

_DOMAIN_STATUS: tuple[tuple[type[DomainError], int, str], ...] = (
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND, "Not Found"),
    (EntityAlreadyExistsError, status.HTTP_409_CONFLICT, "Conflict"),
    (ValidationError, status.HTTP_400_BAD_REQUEST, "Bad Request"),
)


def _error_response(
    status_code: int,
    error: str,
    message: str,
    details: list[str] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(error=error, message=message, status=status_code, details=details or [])
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True),
        headers=headers,
    )


def _format_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    return f"{location}: {error.get('msg', 'invalid value')}" if location else error["msg"]


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        for error_type, status_code, error in _DOMAIN_STATUS:
            if isinstance(exc, error_type):
                logger.info(
                    "domain_error",
                    path=request.url.path,
                    status=status_code,
                    error_type=type(exc).__name__,
                    message=exc.message,
                )
                return _error_response(status_code, error, exc.message)

        logger.error("unmapped_domain_error", path=request.url.path, error=str(exc))
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "An unexpected error occurred",
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        details = [_format_validation_error(error) for error in exc.errors()]
        logger.info("request_validation_failed", path=request.url.path, details=details)
        return _error_response(
            status.HTTP_400_BAD_REQUEST,
            "Bad Request",
            "Request validation failed",
            details,
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_response(
            exc.status_code,
            HTTPStatus(exc.status_code).phrase,
            str(exc.detail),
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        # Never leak internal details to the caller
        logger.exception("unhandled_exception", path=request.url.path)
        return _error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "Internal Server Error",
            "An unexpected error occurred",
        )
