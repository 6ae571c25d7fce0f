# server/errors.py

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from server.core.validation import summarize_errors


logger = logging.getLogger(__name__)


# -------------------------------
# Error taxonomy
# -------------------------------

class AppError(Exception):
    """
    Base class for errors that map onto a specific HTTP status.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code

    def to_content(self) -> dict:
        return {"message": self.message}


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message)
        self.errors = errors or []

    def to_content(self) -> dict:
        content = super().to_content()
        if self.errors:
            content["errors"] = summarize_errors(self.errors)
        return content


class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Unauthorized(AuthError):
    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(AuthError):
    status_code = status.HTTP_403_FORBIDDEN


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class InfrastructureError(AppError):
    """
    Storage or email provider failure. The message is safe to show callers;
    the underlying exception is kept on __cause__ for the logs.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


# -------------------------------
# Handlers
# -------------------------------

async def _app_error_handler(request: Request, exc: AppError):
    if isinstance(exc, InfrastructureError):
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message, exc_info=exc.__cause__)
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def _request_validation_handler(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(p) for p in err.get("loc", ()) if p != "body"), "message": err.get("msg", "Invalid value")}
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid request data", "errors": summarize_errors(errors)},
    )


async def _unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def install_error_handlers(app: FastAPI):
    app.add_exception_handler(AppError, _app_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
