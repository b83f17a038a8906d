"""Login schemas."""
from datetime import datetime
from typing import Optional, List
from uuid import UUID
from pydantic import BaseModel, Field


class LoginCreate(BaseModel):
    """Schema for creating a login."""
    login: str = Field(min_length=1, max_length=255)
    banned: bool = False


class LoginUpdate(BaseModel):
    """Schema for renaming a login."""
    login: str = Field(min_length=1, max_length=255)


class LoginResponse(BaseModel):
    """Login response schema."""
    uuid: UUID
    login: str
    banned: bool
    created_at: Optional[datetime] = Field(None, serialization_alias="createdAt")
    updated_at: Optional[datetime] = Field(None, serialization_alias="updatedAt")

    class Config:
        from_attributes = True


class BanResponse(BaseModel):
    """Result of a ban request."""
    banned: bool


class PageMeta(BaseModel):
    """Listing metadata."""
    count: int
    page: int
    limit: int


class LoginPageResponse(BaseModel):
    """Paginated login list response."""
    meta: PageMeta
    records: List[LoginResponse]
