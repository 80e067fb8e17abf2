"""
Event model grouping people and their shared expenses.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from evensplit.db.base import BaseModel


class Event(BaseModel):
    """Event model representing one occasion whose costs are split."""
    __tablename__ = "events"

    name = Column(String(200), nullable=False)
    image_url = Column(String(500), nullable=True)

    # Relationships
    people = relationship("Person", back_populates="event", cascade="all, delete-orphan", order_by="Person.id")
    expenses = relationship("Expense", back_populates="event", cascade="all, delete-orphan", order_by="Expense.id")
