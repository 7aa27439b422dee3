from datetime import datetime, timezone
from typing import Optional

from app.schemas.comment import CommentCreate
from app.schemas.waitlist import WaitlistCreate


def utc_timestamp() -> str:
    """Current UTC time as ``2026-01-31T09:15:00.123Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def normalize_email(email: str) -> str:
    return email.strip().lower()


def _optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def sanitize_waitlist(fields: WaitlistCreate) -> dict:
    return {
        "email":      normalize_email(fields.email),
        "name":       _optional_text(fields.name),
        "created_at": utc_timestamp(),
    }


def sanitize_comment(fields: CommentCreate) -> dict:
    return {
        "name":       _optional_text(fields.name),
        "email":      normalize_email(fields.email),
        "subject":    _optional_text(fields.subject),
        "comment":    fields.comment.strip(),
        "created_at": utc_timestamp(),
    }
