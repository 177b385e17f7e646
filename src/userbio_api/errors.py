"""Translation of operation outcomes into HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from userbio.errors import UserServiceError
from userbio_api.config import Settings
from userbio_api.middleware import cors_headers_for

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    """Build the JSON body for a failed request.

    404 responses carry ``message``; every other failure carries ``errorMessage``.
    """
    key = "message" if status_code == status.HTTP_404_NOT_FOUND else "errorMessage"
    return JSONResponse(status_code=status_code, content={key: message}, headers=headers)


def describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid value")
    return f"{location}: {message}" if location else message


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Install the exception handlers that map outcomes to status codes."""

    async def user_service_error_handler(request: Request, exc: UserServiceError) -> JSONResponse:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.message)
        return error_response(exc.status_code, exc.message)

    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        message = describe_validation_error(exc)
        logger.info("%s %s -> 400: %s", request.method, request.url.path, message)
        return error_response(status.HTTP_400_BAD_REQUEST, message)

    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("Unhandled exception: %s", exc, exc_info=True)

        # Runs outside the CORS middleware, so add the headers here
        cors_headers = cors_headers_for(request.headers.get("origin"), settings.cors_origins)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc), headers=cors_headers)

    app.add_exception_handler(UserServiceError, user_service_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
