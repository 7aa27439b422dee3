"""
Intake error taxonomy and the FastAPI handlers that render it.

Every client-facing failure is a JSON body ``{"error": <message>, "code": <code>}``.
Storage and runtime faults are logged here and answered with a generic 500.
"""
from __future__ import annotations

import enum
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ErrorCode(str, enum.Enum):
    MISSING_EMAIL = "MISSING_EMAIL"
    MISSING_COMMENT = "MISSING_COMMENT"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    EMPTY_COMMENT = "EMPTY_COMMENT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    INVALID_REQUEST = "INVALID_REQUEST"


class IntakeError(Exception):
    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, code: ErrorCode, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.message, "code": self.code.value}


class IntakeValidationError(IntakeError):
    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateEmailError(IntakeError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, message: str = "Email already registered for waitlist"):
        super().__init__(ErrorCode.DUPLICATE_EMAIL, message)


# ── Handlers ──────────────────────────────────────────────────────────────────

async def intake_error_handler(request: Request, exc: IntakeError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Malformed request", "code": ErrorCode.INVALID_REQUEST.value},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("%s %s failed", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(IntakeError, intake_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(SQLAlchemyError, unhandled_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
