"""
Balance and settlement routes.

Nothing here is stored: every request recomputes from the current expenses.
"""
import logging
import math
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from typing import List
from evensplit.db.session import get_db
from evensplit.schemas.settlement import (
    PersonBalanceResponse, TransferResponse, SettlementSummary,
    SettlementRequest, SettlementCalculationResponse, NamedTransfer
)
from evensplit.services.balance_service import InvalidExpenseError, balances_by_id, calculate_balances
from evensplit.services.expense_service import load_event_ledger
from evensplit.services.overview_service import build_event_overview
from evensplit.services.settlement_service import calculate_settlements, format_transfer, legacy_lines
from evensplit.api.routes.events import get_event_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settlement", tags=["settlement"])


def _transfer_responses(transfers, names) -> List[TransferResponse]:
    return [
        TransferResponse(
            from_person_id=t.debtor,
            from_name=names[t.debtor],
            to_person_id=t.creditor,
            to_name=names[t.creditor],
            amount=t.amount,
            message=format_transfer(t, names)
        )
        for t in transfers
    ]


def _invalid_ledger(e: InvalidExpenseError) -> HTTPException:
    logger.error(f"Stored expenses cannot be split: {e}")
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail=str(e)
    )


@router.get("/{event_id}/balances", response_model=List[PersonBalanceResponse])
async def get_balances(
    event_id: int,
    db: Session = Depends(get_db)
):
    """Get each person's net balance for an event."""
    get_event_or_404(event_id, db)
    people, expenses, _ = load_event_ledger(event_id, db)
    try:
        return calculate_balances(people, expenses)
    except InvalidExpenseError as e:
        raise _invalid_ledger(e)


@router.get("/{event_id}/transfers", response_model=List[TransferResponse])
async def get_transfers(
    event_id: int,
    db: Session = Depends(get_db)
):
    """Get the minimal list of transfers that settles an event."""
    get_event_or_404(event_id, db)
    people, expenses, _ = load_event_ledger(event_id, db)
    try:
        balances = calculate_balances(people, expenses)
    except InvalidExpenseError as e:
        raise _invalid_ledger(e)

    names = {p.id: p.name for p in people}
    transfers = calculate_settlements(balances_by_id(balances))
    return _transfer_responses(transfers, names)


@router.get("/{event_id}/overview", response_model=SettlementSummary)
async def get_overview(
    event_id: int,
    db: Session = Depends(get_db)
):
    """Get balances, transfers and display lines for an event."""
    get_event_or_404(event_id, db)
    people, expenses, expense_names = load_event_ledger(event_id, db)
    try:
        overview = build_event_overview(people, expenses, expense_names)
    except InvalidExpenseError as e:
        raise _invalid_ledger(e)

    names = {p.id: p.name for p in people}
    return SettlementSummary(
        event_id=event_id,
        total_cents=overview.total_cents,
        balances=[PersonBalanceResponse.model_validate(b) for b in overview.balances],
        transfers=_transfer_responses(overview.transfers, names),
        expense_lines=overview.expense_lines,
        positive_series=overview.positive_series,
        negative_series=overview.negative_series
    )


@router.post("/calculate", response_model=SettlementCalculationResponse)
async def calculate(request: SettlementRequest):
    """Settle an arbitrary name -> balance mapping without touching the database."""
    invalid = sorted(name for name, balance in request.balances.items() if not math.isfinite(balance))
    if invalid:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Balances must be finite numbers: {', '.join(invalid)}"
        )

    transfers = calculate_settlements(request.balances)
    return SettlementCalculationResponse(
        transfers=[
            NamedTransfer(from_name=t.debtor, to_name=t.creditor, amount=t.amount)
            for t in transfers
        ],
        messages=legacy_lines(transfers)
    )
