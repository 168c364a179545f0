"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import structlog

from src.domain.exceptions import DomainException, InvalidTransactionException
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

HTTP_ERROR_CODES = {
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
}


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Build a response with the standard error body."""
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": message,
            "statusCode": status_code,
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(InvalidTransactionException)
    async def invalid_transaction_handler(
        request: Request,
        exc: InvalidTransactionException,
    ) -> JSONResponse:
        """Handle transaction validation errors."""
        return error_response(400, exc.code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Handle bodies FastAPI could not decode."""
        logger.info(
            "request_body_invalid",
            request_id=get_request_id(),
            errors=len(exc.errors()),
        )
        return error_response(
            400,
            "VALIDATION_ERROR",
            "Request body must be a valid JSON object",
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return error_response(exc.status_code, exc.code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Handle unmatched routes and other HTTP errors."""
        if exc.status_code == 404:
            message = f"Route {request.method} {request.url.path} not found"
        else:
            message = str(exc.detail)
        return error_response(
            exc.status_code,
            HTTP_ERROR_CODES.get(exc.status_code, "HTTP_ERROR"),
            message,
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
