"""
Expense model for tracking shared spending.
"""
from sqlalchemy import Column, String, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from evensplit.db.base import BaseModel


class Expense(BaseModel):
    """Expense model representing a single payment split equally among participants."""
    __tablename__ = "expenses"

    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    payer_id = Column(Integer, ForeignKey("people.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    cost_cents = Column(Integer, nullable=True)  # Minor units; NULL counts as zero

    # Relationships
    event = relationship("Event", back_populates="expenses")
    payer = relationship("Person", foreign_keys=[payer_id], back_populates="expenses_paid")
    participants = relationship(
        "ExpenseParticipant",
        back_populates="expense",
        cascade="all, delete-orphan",
        order_by="ExpenseParticipant.id"
    )

    @property
    def participant_ids(self):
        return [p.person_id for p in self.participants]


class ExpenseParticipant(BaseModel):
    """Junction table for Expense and Person many-to-many relationship."""
    __tablename__ = "expense_participants"
    __table_args__ = (
        UniqueConstraint("expense_id", "person_id", name="uq_expense_participant"),
    )

    expense_id = Column(Integer, ForeignKey("expenses.id"), nullable=False, index=True)
    person_id = Column(Integer, ForeignKey("people.id"), nullable=False, index=True)

    # Relationships
    expense = relationship("Expense", back_populates="participants")
    person = relationship("Person", back_populates="expense_participants")
