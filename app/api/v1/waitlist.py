from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from app.core.deps import get_intake_service, get_query_service
from app.schemas.waitlist import WaitlistCount, WaitlistCreate, WaitlistRead
from app.services.intake import IntakeService
from app.services.query import QueryService

router = APIRouter(prefix="/waitlist", tags=["waitlist"])


@router.post("", response_model=WaitlistRead, status_code=status.HTTP_201_CREATED)
async def join_waitlist(
    payload: WaitlistCreate,
    intake: IntakeService = Depends(get_intake_service),
):
    return await intake.submit_waitlist(payload)


@router.get("", response_model=None)
async def list_waitlist(
    count: Optional[str] = Query(None, description="'true' returns only the number of signups"),
    query: QueryService = Depends(get_query_service),
):
    # any other value, including a malformed one, falls back to the full listing
    if count == "true":
        return WaitlistCount(count=await query.count_waitlist())
    signups = await query.list_waitlist()
    return [WaitlistRead.model_validate(s) for s in signups]
