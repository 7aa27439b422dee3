"""
Intake of landing-page submissions.

Each submission runs validate -> sanitize -> (waitlist) duplicate pre-check
-> insert, and stops at the first failure. The pre-check is racy under
concurrent submissions, so a unique-constraint rejection from the store is
mapped to the same DuplicateEmailError.
"""
from __future__ import annotations

import logging

from app.core.errors import DuplicateEmailError, IntakeValidationError
from app.models.comment import Comment
from app.models.waitlist import WaitlistSignup
from app.schemas.comment import CommentCreate
from app.schemas.waitlist import WaitlistCreate
from app.services.sanitize import sanitize_comment, sanitize_waitlist
from app.services.store import DuplicateRecordError, RecordStore
from app.services.validation import validate_comment, validate_waitlist

logger = logging.getLogger(__name__)


class IntakeService:
    def __init__(self, store: RecordStore):
        self.store = store

    async def submit_waitlist(self, fields: WaitlistCreate) -> WaitlistSignup:
        try:
            validate_waitlist(fields)
        except IntakeValidationError as exc:
            logger.debug("Waitlist submission rejected: %s", exc.code.value)
            raise

        record = sanitize_waitlist(fields)

        if await self.store.find_waitlist_by_email(record["email"]) is not None:
            logger.info("Waitlist email already registered: %s", record["email"])
            raise DuplicateEmailError()

        try:
            signup = await self.store.insert_waitlist(record)
        except DuplicateRecordError as exc:
            raise DuplicateEmailError() from exc

        logger.info("Waitlist signup id=%d created", signup.id)
        return signup

    async def submit_comment(self, fields: CommentCreate) -> Comment:
        try:
            validate_comment(fields)
        except IntakeValidationError as exc:
            logger.debug("Comment submission rejected: %s", exc.code.value)
            raise

        comment = await self.store.insert_comment(sanitize_comment(fields))
        logger.info("Comment id=%d created", comment.id)
        return comment
