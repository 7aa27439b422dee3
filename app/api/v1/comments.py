from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.core.deps import get_intake_service, get_query_service
from app.schemas.comment import CommentCreate, CommentRead
from app.services.intake import IntakeService
from app.services.query import QueryService

router = APIRouter(prefix="/comments", tags=["comments"])


@router.post("", response_model=CommentRead, status_code=status.HTTP_201_CREATED)
async def create_comment(
    payload: CommentCreate,
    intake: IntakeService = Depends(get_intake_service),
):
    return await intake.submit_comment(payload)


@router.get("", response_model=List[CommentRead])
async def list_comments(
    limit: Optional[int] = Query(None, description="Page size, clamped to 1..100"),
    offset: Optional[int] = Query(None, description="Rows to skip"),
    search: Optional[str] = Query(None, description="Substring matched against name, email, subject and comment"),
    query: QueryService = Depends(get_query_service),
):
    """Newest comments first, optionally filtered by a case-insensitive search term."""
    return await query.list_comments(limit=limit, offset=offset, search=search)
