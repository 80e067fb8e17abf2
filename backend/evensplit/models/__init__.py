"""Models package - Import all models for SQLAlchemy registration."""
from evensplit.models.event import Event
from evensplit.models.person import Person
from evensplit.models.expense import Expense, ExpenseParticipant

__all__ = [
    "Event",
    "Person",
    "Expense",
    "ExpenseParticipant",
]
