"""
Pydantic schemas for balances and settlements.
"""
from pydantic import BaseModel
from typing import List, Dict


class PersonBalanceResponse(BaseModel):
    """Schema for one person's net balance (positive = is owed, negative = owes)."""
    person_id: int
    person_name: str
    balance: float

    class Config:
        from_attributes = True


class TransferResponse(BaseModel):
    """Schema for a single transfer in a settlement."""
    from_person_id: int
    from_name: str
    to_person_id: int
    to_name: str
    amount: float  # Major units, rounded to 2 decimals
    message: str


class SettlementSummary(BaseModel):
    """Schema for the full money overview of an event."""
    event_id: int
    total_cents: int
    balances: List[PersonBalanceResponse]
    transfers: List[TransferResponse]
    expense_lines: List[str]
    positive_series: List[float]
    negative_series: List[float]


class SettlementRequest(BaseModel):
    """Schema for a stateless settlement request keyed by name."""
    balances: Dict[str, float]


class NamedTransfer(BaseModel):
    """Schema for a transfer between named people."""
    from_name: str
    to_name: str
    amount: float


class SettlementCalculationResponse(BaseModel):
    """Schema for a stateless settlement response."""
    transfers: List[NamedTransfer]
    messages: List[str]  # Legacy format, each line with a leading space
