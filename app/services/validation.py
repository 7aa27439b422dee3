"""
Shape and format checks for incoming form submissions.

Runs before any normalisation or I/O; a failure raises
IntakeValidationError carrying a stable ErrorCode.
"""
from __future__ import annotations

import re

from app.core.errors import ErrorCode, IntakeValidationError
from app.schemas.comment import CommentCreate
from app.schemas.waitlist import WaitlistCreate

# local@domain.tld, no whitespace or extra "@" anywhere. Syntax only, no DNS.
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


def validate_email(raw: str | None) -> bool:
    if not raw:
        return False
    return _EMAIL_RE.fullmatch(raw.strip()) is not None


def validate_comment(fields: CommentCreate) -> None:
    if not fields.email:
        raise IntakeValidationError(ErrorCode.MISSING_EMAIL, "Email is required")
    if not fields.comment:
        raise IntakeValidationError(ErrorCode.MISSING_COMMENT, "Comment is required")
    if not validate_email(fields.email):
        raise IntakeValidationError(ErrorCode.INVALID_EMAIL, "Invalid email format")
    if not fields.comment.strip():
        raise IntakeValidationError(ErrorCode.EMPTY_COMMENT, "Comment cannot be empty")


def validate_waitlist(fields: WaitlistCreate) -> None:
    if not fields.email:
        raise IntakeValidationError(ErrorCode.MISSING_EMAIL, "Email is required")
    if not validate_email(fields.email):
        raise IntakeValidationError(ErrorCode.INVALID_EMAIL_FORMAT, "Invalid email format")
