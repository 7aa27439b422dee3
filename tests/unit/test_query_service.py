from unittest.mock import AsyncMock

import pytest

from app.services.query import QueryService
from app.services.store import RecordStore


@pytest.mark.asyncio
async def test_list_comments_applies_defaults():
    store = AsyncMock(spec=RecordStore)
    store.list_comments.return_value = []
    await QueryService(store, default_limit=10, max_limit=100).list_comments()
    store.list_comments.assert_awaited_once_with(limit=10, offset=0, search=None, max_limit=100)


@pytest.mark.asyncio
async def test_list_comments_passes_parameters_through():
    store = AsyncMock(spec=RecordStore)
    store.list_comments.return_value = []
    await QueryService(store, max_limit=50).list_comments(limit=500, offset=20, search="refund")
    store.list_comments.assert_awaited_once_with(limit=500, offset=20, search="refund", max_limit=50)


@pytest.mark.asyncio
async def test_waitlist_count_and_list(query: QueryService, store: RecordStore):
    await store.insert_waitlist({"email": "a@b.com", "name": None, "created_at": "2026-01-01T00:00:00.000Z"})
    assert await query.count_waitlist() == 1
    assert [s.email for s in await query.list_waitlist()] == ["a@b.com"]
