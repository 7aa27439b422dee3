from typing import Optional

from app.core.config import settings
from app.models.comment import Comment
from app.models.waitlist import WaitlistSignup
from app.services.store import RecordStore


class QueryService:
    """Read side: translates listing parameters into store queries."""

    def __init__(
        self,
        store: RecordStore,
        default_limit: int = settings.COMMENTS_DEFAULT_LIMIT,
        max_limit: int = settings.COMMENTS_MAX_LIMIT,
    ):
        self.store = store
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def list_comments(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        search: Optional[str] = None,
    ) -> list[Comment]:
        return await self.store.list_comments(
            limit=self.default_limit if limit is None else limit,
            offset=offset or 0,
            search=search,
            max_limit=self.max_limit,
        )

    async def list_waitlist(self) -> list[WaitlistSignup]:
        return await self.store.list_waitlist()

    async def count_waitlist(self) -> int:
        return await self.store.count_waitlist()
