from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.services.intake import IntakeService
from app.services.query import QueryService
from app.services.store import RecordStore


async def get_store(db: AsyncSession = Depends(get_db)) -> RecordStore:
    return RecordStore(db)


async def get_intake_service(store: RecordStore = Depends(get_store)) -> IntakeService:
    return IntakeService(store)


async def get_query_service(store: RecordStore = Depends(get_store)) -> QueryService:
    return QueryService(store)
