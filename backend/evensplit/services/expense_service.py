"""
Expense service for expense-related business logic.
"""
import logging
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session, selectinload
from evensplit.models.expense import Expense, ExpenseParticipant
from evensplit.models.person import Person
from evensplit.services.balance_service import ExpenseShare, Participant

logger = logging.getLogger(__name__)


def create_expense(
    event_id: int,
    name: str,
    cost_cents: Optional[int],
    payer_id: int,
    participant_ids: List[int],
    db: Session
) -> Expense:
    """Create an expense; the payer always shares in it."""
    event_person_ids = {
        pid for (pid,) in db.query(Person.id).filter(Person.event_id == event_id).all()
    }
    if payer_id not in event_person_ids:
        raise ValueError(f"Payer {payer_id} is not part of this event")

    unknown = [pid for pid in participant_ids if pid not in event_person_ids]
    if unknown:
        raise ValueError(f"Participants {unknown} are not part of this event")

    # Payer first, then participants in the order given, without duplicates
    unique_participants = list(dict.fromkeys([payer_id, *participant_ids]))

    expense = Expense(
        event_id=event_id,
        payer_id=payer_id,
        name=name,
        cost_cents=cost_cents
    )
    db.add(expense)
    db.flush()

    for person_id in unique_participants:
        db.add(ExpenseParticipant(expense_id=expense.id, person_id=person_id))

    db.commit()
    db.refresh(expense)
    logger.info(f"Created expense {expense.id} in event {event_id} split {len(unique_participants)} ways")
    return expense


def delete_expense(expense_id: int, db: Session):
    """Delete an expense and its participants."""
    expense = db.query(Expense).filter(Expense.id == expense_id).first()
    if not expense:
        raise ValueError("Expense not found")

    db.delete(expense)
    db.commit()
    logger.info(f"Deleted expense {expense_id}")


def load_event_ledger(
    event_id: int,
    db: Session
) -> Tuple[List[Participant], List[ExpenseShare], List[str]]:
    """Load an event's people and expenses as plain balance inputs."""
    people = db.query(Person).filter(Person.event_id == event_id).order_by(Person.id).all()
    expenses = db.query(Expense).options(
        selectinload(Expense.participants)
    ).filter(
        Expense.event_id == event_id
    ).order_by(Expense.id).all()

    participants = [Participant(id=p.id, name=p.name) for p in people]
    shares = [
        ExpenseShare(
            payer_id=e.payer_id,
            amount_cents=e.cost_cents,
            participant_ids=tuple(e.participant_ids)
        )
        for e in expenses
    ]
    expense_names = [e.name for e in expenses]
    return participants, shares, expense_names
