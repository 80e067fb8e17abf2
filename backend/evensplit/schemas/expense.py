"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime


class ExpenseCreate(BaseModel):
    """Schema for expense creation."""
    name: str = Field(min_length=1, max_length=200)
    cost_cents: Optional[int] = Field(default=None, ge=0)  # Cost in cents; null counts as zero
    payer_id: int
    participant_ids: List[int] = []  # Person IDs sharing this expense; payer is always added


class ExpenseResponse(BaseModel):
    """Schema for expense response."""
    id: int
    event_id: int
    payer_id: int
    payer_name: str
    name: str
    cost_cents: Optional[int] = None
    participant_ids: List[int] = []
    created_at: datetime

    class Config:
        from_attributes = True
