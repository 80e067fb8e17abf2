"""
Expense management routes.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session, joinedload, selectinload
from typing import List
from evensplit.db.session import get_db
from evensplit.models.expense import Expense
from evensplit.schemas.expense import ExpenseCreate, ExpenseResponse
from evensplit.services.expense_service import create_expense, delete_expense
from evensplit.api.routes.events import get_event_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/expenses", tags=["expenses"])


def to_expense_response(expense: Expense) -> ExpenseResponse:
    return ExpenseResponse(
        id=expense.id,
        event_id=expense.event_id,
        payer_id=expense.payer_id,
        payer_name=expense.payer.name,
        name=expense.name,
        cost_cents=expense.cost_cents,
        participant_ids=expense.participant_ids,
        created_at=expense.created_at
    )


@router.get("/{event_id}", response_model=List[ExpenseResponse])
async def list_expenses(
    event_id: int,
    db: Session = Depends(get_db)
):
    """List the expenses of an event."""
    get_event_or_404(event_id, db)

    expenses = db.query(Expense).options(
        joinedload(Expense.payer),
        selectinload(Expense.participants)
    ).filter(
        Expense.event_id == event_id
    ).order_by(Expense.id).all()

    return [to_expense_response(e) for e in expenses]


@router.post("/{event_id}", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
async def add_expense(
    event_id: int,
    expense_data: ExpenseCreate,
    db: Session = Depends(get_db)
):
    """Create a new expense split equally among its participants."""
    get_event_or_404(event_id, db)

    try:
        expense = create_expense(
            event_id=event_id,
            name=expense_data.name,
            cost_cents=expense_data.cost_cents,
            payer_id=expense_data.payer_id,
            participant_ids=expense_data.participant_ids,
            db=db
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return to_expense_response(expense)


@router.delete("/{event_id}/{expense_id}")
async def remove_expense(
    event_id: int,
    expense_id: int,
    db: Session = Depends(get_db)
):
    """Delete an expense."""
    get_event_or_404(event_id, db)

    expense = db.query(Expense).filter(
        Expense.id == expense_id,
        Expense.event_id == event_id
    ).first()
    if not expense:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Expense not found"
        )

    delete_expense(expense_id, db)
    return {"message": "Expense deleted successfully"}
