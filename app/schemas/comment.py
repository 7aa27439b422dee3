from typing import Optional

from pydantic import BaseModel, Field


class CommentCreate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    comment: Optional[str] = None


class CommentRead(BaseModel):
    id: int
    name: Optional[str]
    email: str
    subject: Optional[str]
    comment: str
    created_at: str = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}
