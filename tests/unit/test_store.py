"""
Record store tests against a throwaway sqlite database.
"""
import pytest
from sqlalchemy import Text

from app.models.comment import Comment
from app.models.waitlist import WaitlistSignup
from app.services.sanitize import utc_timestamp
from app.services.store import DuplicateRecordError, RecordStore, clamp_limit


def _signup(email, name=None, created_at=None):
    return {"email": email, "name": name, "created_at": created_at or utc_timestamp()}


def _comment(comment, email="x@y.com", name=None, subject=None, created_at=None):
    return {
        "name": name,
        "email": email,
        "subject": subject,
        "comment": comment,
        "created_at": created_at or utc_timestamp(),
    }


def test_clamp_limit():
    assert clamp_limit(None) == 10
    assert clamp_limit(500) == 100
    assert clamp_limit(0) == 1
    assert clamp_limit(-3) == 1
    assert clamp_limit(25) == 25
    assert clamp_limit(50, maximum=20) == 20
    assert clamp_limit(500, maximum=1000) == 100


class TestWaitlistStore:
    @pytest.mark.asyncio
    async def test_insert_assigns_increasing_ids(self, store: RecordStore):
        first = await store.insert_waitlist(_signup("a@b.com"))
        second = await store.insert_waitlist(_signup("c@d.com", name="Cee"))
        assert first.id == 1
        assert second.id > first.id
        assert second.name == "Cee"

    @pytest.mark.asyncio
    async def test_unique_constraint_enforced_by_database(self, store: RecordStore):
        await store.insert_waitlist(_signup("a@b.com"))
        with pytest.raises(DuplicateRecordError):
            await store.insert_waitlist(_signup("a@b.com"))
        # session is usable again after the rollback
        assert await store.count_waitlist() == 1

    @pytest.mark.asyncio
    async def test_find_by_email(self, store: RecordStore):
        await store.insert_waitlist(_signup("a@b.com"))
        found = await store.find_waitlist_by_email("a@b.com")
        assert found is not None and found.email == "a@b.com"
        assert await store.find_waitlist_by_email("zz@b.com") is None

    @pytest.mark.asyncio
    async def test_list_oldest_first(self, store: RecordStore):
        await store.insert_waitlist(_signup("late@b.com", created_at="2026-02-01T00:00:00.000Z"))
        await store.insert_waitlist(_signup("early@b.com", created_at="2026-01-01T00:00:00.000Z"))
        emails = [s.email for s in await store.list_waitlist()]
        assert emails == ["early@b.com", "late@b.com"]

    @pytest.mark.asyncio
    async def test_count(self, store: RecordStore):
        assert await store.count_waitlist() == 0
        await store.insert_waitlist(_signup("a@b.com"))
        await store.insert_waitlist(_signup("b@b.com"))
        assert await store.count_waitlist() == 2


class TestCommentStore:
    @pytest.mark.asyncio
    async def test_same_email_allowed_twice(self, store: RecordStore):
        await store.insert_comment(_comment("one"))
        await store.insert_comment(_comment("two"))
        assert len(await store.list_comments()) == 2

    @pytest.mark.asyncio
    async def test_newest_first(self, store: RecordStore):
        await store.insert_comment(_comment("old", created_at="2026-01-01T00:00:00.000Z"))
        await store.insert_comment(_comment("new", created_at="2026-03-01T00:00:00.000Z"))
        await store.insert_comment(_comment("mid", created_at="2026-02-01T00:00:00.000Z"))
        assert [c.comment for c in await store.list_comments()] == ["new", "mid", "old"]

    @pytest.mark.asyncio
    async def test_limit_and_offset(self, store: RecordStore):
        for i in range(15):
            await store.insert_comment(_comment(f"c{i}", created_at=f"2026-01-01T00:00:{i:02d}.000Z"))
        assert len(await store.list_comments()) == 10
        page = await store.list_comments(limit=5, offset=5)
        assert [c.comment for c in page] == ["c9", "c8", "c7", "c6", "c5"]
        assert await store.list_comments(offset=100) == []

    @pytest.mark.asyncio
    async def test_limit_capped_at_100(self, store: RecordStore):
        for i in range(105):
            await store.insert_comment(_comment(f"c{i}"))
        assert len(await store.list_comments(limit=500)) == 100

    @pytest.mark.asyncio
    async def test_search_matches_any_field_case_insensitively(self, store: RecordStore):
        await store.insert_comment(_comment("hello", subject="refund request"))
        await store.insert_comment(_comment("I want a REFUND"))
        await store.insert_comment(_comment("hi", name="Refundia"))
        await store.insert_comment(_comment("hi", email="refunds@shop.com"))
        await store.insert_comment(_comment("unrelated", subject="pricing"))

        results = await store.list_comments(search="refund")
        assert len(results) == 4
        assert all(c.comment != "unrelated" for c in results)

    @pytest.mark.asyncio
    async def test_search_treats_wildcards_literally(self, store: RecordStore):
        await store.insert_comment(_comment("100% happy"))
        await store.insert_comment(_comment("100 happy"))
        results = await store.list_comments(search="100%")
        assert [c.comment for c in results] == ["100% happy"]

    @pytest.mark.asyncio
    async def test_blank_search_is_ignored(self, store: RecordStore):
        await store.insert_comment(_comment("one"))
        assert len(await store.list_comments(search="   ")) == 1


@pytest.mark.parametrize("column", [
    WaitlistSignup.__table__.c.email,
    WaitlistSignup.__table__.c.name,
    Comment.__table__.c.name,
    Comment.__table__.c.email,
    Comment.__table__.c.subject,
    Comment.__table__.c.comment,
])
def test_text_columns_have_no_length_limit(column):
    # user-supplied text has no length cap on any backend
    assert isinstance(column.type, Text)
    assert column.type.length is None


@pytest.mark.asyncio
async def test_long_fields_round_trip(store: RecordStore):
    long_text = "x" * 1000
    comment = await store.insert_comment(_comment("hi", name=long_text, subject=long_text))
    assert comment.name == long_text
    assert comment.subject == long_text
