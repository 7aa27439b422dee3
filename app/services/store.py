"""
Record store for waitlist signups and comments.

The only place that talks SQL. Email uniqueness for signups is enforced by
the unique index on waitlist_signups.email; a violation surfaces here as
DuplicateRecordError so callers never see driver exceptions for it.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.comment import Comment
from app.models.waitlist import WaitlistSignup

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


class DuplicateRecordError(Exception):
    """A row with the same unique key already exists."""


def clamp_limit(limit: Optional[int], default: int = DEFAULT_PAGE_SIZE, maximum: int = MAX_PAGE_SIZE) -> int:
    if limit is None:
        limit = default
    return max(1, min(limit, maximum, MAX_PAGE_SIZE))


def _like_pattern(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


class RecordStore:
    def __init__(self, session: AsyncSession):
        self.session = session

    # ── Waitlist ──────────────────────────────────────────────────────────────

    async def insert_waitlist(self, record: dict) -> WaitlistSignup:
        signup = WaitlistSignup(**record)
        self.session.add(signup)
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.info("Unique constraint rejected waitlist email %s", record["email"])
            raise DuplicateRecordError(record["email"]) from exc
        await self.session.refresh(signup)
        return signup

    async def find_waitlist_by_email(self, email: str) -> Optional[WaitlistSignup]:
        result = await self.session.execute(
            select(WaitlistSignup).where(WaitlistSignup.email == email).limit(1)
        )
        return result.scalar_one_or_none()

    async def list_waitlist(self) -> list[WaitlistSignup]:
        result = await self.session.execute(
            select(WaitlistSignup).order_by(WaitlistSignup.created_at, WaitlistSignup.id)
        )
        return list(result.scalars().all())

    async def count_waitlist(self) -> int:
        result = await self.session.execute(select(func.count(WaitlistSignup.id)))
        return result.scalar_one()

    # ── Comments ──────────────────────────────────────────────────────────────

    async def insert_comment(self, record: dict) -> Comment:
        comment = Comment(**record)
        self.session.add(comment)
        await self.session.commit()
        await self.session.refresh(comment)
        return comment

    async def list_comments(
        self,
        limit: Optional[int] = DEFAULT_PAGE_SIZE,
        offset: int = 0,
        search: Optional[str] = None,
        max_limit: int = MAX_PAGE_SIZE,
    ) -> list[Comment]:
        stmt = select(Comment).order_by(Comment.created_at.desc(), Comment.id.desc())

        if search and search.strip():
            pattern = _like_pattern(search.strip())
            stmt = stmt.where(
                or_(
                    Comment.name.ilike(pattern, escape="\\"),
                    Comment.email.ilike(pattern, escape="\\"),
                    Comment.subject.ilike(pattern, escape="\\"),
                    Comment.comment.ilike(pattern, escape="\\"),
                )
            )

        stmt = stmt.limit(clamp_limit(limit, maximum=max_limit)).offset(max(0, offset or 0))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
