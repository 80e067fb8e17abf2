"""
Overview service: everything the event page shows about money in one pass.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from evensplit.core.utils import format_cents_short
from evensplit.services.balance_service import (
    ExpenseShare, Participant, PersonBalance, balances_by_id, calculate_balances
)
from evensplit.services.settlement_service import Transfer, calculate_settlements, format_transfer


@dataclass
class EventOverview:
    """Derived money view of one event."""
    total_cents: int
    balances: List[PersonBalance]
    transfers: List[Transfer[int]]
    settlement_lines: List[str]
    expense_lines: List[str] = field(default_factory=list)
    positive_series: List[float] = field(default_factory=list)
    negative_series: List[float] = field(default_factory=list)


def build_event_overview(
    people: Sequence[Participant],
    expenses: Sequence[ExpenseShare],
    expense_names: Optional[Sequence[str]] = None
) -> EventOverview:
    """
    Build balances, transfers and display lines for an event.

    Transfers are keyed by person id; names are resolved only for the
    rendered lines. `expense_names` runs parallel to `expenses`.
    """
    names: Dict[int, str] = {person.id: person.name for person in people}
    balances = calculate_balances(people, expenses)
    transfers = calculate_settlements(balances_by_id(balances))

    expense_lines = []
    for idx, expense in enumerate(expenses):
        payer_name = names.get(expense.payer_id)
        if payer_name is None:
            continue
        label = expense_names[idx] if expense_names else "Expense"
        expense_lines.append(f"{label} {format_cents_short(expense.amount_cents)} paid by {payer_name}")

    return EventOverview(
        total_cents=sum(expense.amount_cents or 0 for expense in expenses),
        balances=balances,
        transfers=transfers,
        settlement_lines=[format_transfer(t, names) for t in transfers],
        expense_lines=expense_lines,
        positive_series=[b.balance if b.balance > 0 else 0.0 for b in balances],
        negative_series=[b.balance if b.balance < 0 else 0.0 for b in balances],
    )
