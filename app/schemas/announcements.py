"""Pydantic schemas for announcements."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class AnnouncementCreate(BaseModel):
    """Admin announcement form; created_by is stamped from the caller."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1, max_length=10_000)

    @field_validator("title", "content")
    @classmethod
    def strip_non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class AnnouncementRead(BaseModel):
    model_config = {"from_attributes": True}

    id: int
    title: str
    content: str
    created_by: int | None
    created_at: datetime
