"""
Pydantic schemas for Event and Person entities.
"""
from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import datetime


class EventCreate(BaseModel):
    """Schema for event creation."""
    name: str
    image_url: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Event name must not be empty")
        return v


class PersonCreate(BaseModel):
    """Schema for adding a person to an event."""
    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Name must not be empty")
        return v


class PersonResponse(BaseModel):
    """Schema for person response."""
    id: int
    event_id: int
    name: str

    class Config:
        from_attributes = True


class EventResponse(BaseModel):
    """Schema for event response."""
    id: int
    name: str
    image_url: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class EventDetailResponse(EventResponse):
    """Schema for detailed event response with people."""
    people: List[PersonResponse] = []
