from pydantic import BaseModel, Field


class WaitlistCreate(BaseModel):
    # Checked by app.services.validation, not by pydantic, so that
    # missing and malformed emails get their own error codes.
    email: str | None = None
    name: str | None = None


class WaitlistRead(BaseModel):
    id: int
    email: str
    name: str | None
    created_at: str = Field(serialization_alias="createdAt")

    model_config = {"from_attributes": True}


class WaitlistCount(BaseModel):
    count: int
