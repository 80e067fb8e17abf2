"""
Person model for event participants.
"""
from sqlalchemy import Column, String, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import relationship
from evensplit.db.base import BaseModel


class Person(BaseModel):
    """A participant of a single event."""
    __tablename__ = "people"
    __table_args__ = (
        UniqueConstraint("event_id", "name", name="uq_people_event_name"),
    )

    event_id = Column(Integer, ForeignKey("events.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)

    # Relationships
    event = relationship("Event", back_populates="people")
    expenses_paid = relationship("Expense", foreign_keys="Expense.payer_id", back_populates="payer", passive_deletes="all")
    expense_participants = relationship("ExpenseParticipant", back_populates="person", passive_deletes="all")
