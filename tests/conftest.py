import os

# Must be set before app.core.config is imported anywhere
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DB_AUTO_CREATE", "false")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.db.session import build_engine, get_db, init_db
from app.main import app
from app.services.intake import IntakeService
from app.services.query import QueryService
from app.services.store import RecordStore


# Fresh sqlite file per test: no cleanup between tests, ids start at 1
@pytest_asyncio.fixture
async def db_engine(tmp_path):
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'landing-test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(db_engine):
    return async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def store(db_session):
    return RecordStore(db_session)


@pytest.fixture
def intake(store):
    return IntakeService(store)


@pytest.fixture
def query(store):
    return QueryService(store)


@pytest_asyncio.fixture
async def client(session_maker):
    """HTTP client against the app with get_db bound to the per-test database."""

    async def _get_test_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
