"""
Balance service: net position of every person from a list of shared expenses.

Costs arrive in integer cents. Each expense is split equally among its
participants, the payer is credited the full cost, and the result is
reported in major units rounded half-up to 2 decimals.

Positive balance = person should receive money.
Negative balance = person owes money.
"""
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from evensplit.core.utils import cents_to_amount

logger = logging.getLogger(__name__)


class InvalidExpenseError(ValueError):
    """Raised for an expense that cannot be split (no participants)."""


@dataclass(frozen=True)
class Participant:
    """A person within one event."""
    id: int
    name: str


@dataclass(frozen=True)
class ExpenseShare:
    """The parts of an expense that matter for balances."""
    payer_id: int
    amount_cents: Optional[int]
    participant_ids: Sequence[int]


@dataclass(frozen=True)
class PersonBalance:
    """Net balance of one person in major currency units."""
    person_id: int
    person_name: str
    balance: float


def calculate_balances(
    people: Sequence[Participant],
    expenses: Iterable[ExpenseShare]
) -> List[PersonBalance]:
    """
    Calculate each person's net balance.

    Returns one entry per person, in the order of `people`. Expenses that
    reference unknown person ids only affect the people that do exist.
    Raises InvalidExpenseError for an expense without participants.
    """
    paid: Dict[int, int] = {person.id: 0 for person in people}
    owed: Dict[int, Decimal] = {person.id: Decimal(0) for person in people}

    for expense in expenses:
        cost = expense.amount_cents or 0
        participant_ids = set(expense.participant_ids)
        if not participant_ids:
            raise InvalidExpenseError(
                f"Expense paid by {expense.payer_id} has no participants to split between"
            )

        if expense.payer_id in paid:
            paid[expense.payer_id] += cost

        share = Decimal(cost) / len(participant_ids)
        for person_id in participant_ids:
            if person_id in owed:
                owed[person_id] += share

    balances = [
        PersonBalance(
            person_id=person.id,
            person_name=person.name,
            balance=cents_to_amount(paid[person.id] - owed[person.id])
        )
        for person in people
    ]
    logger.debug(f"Calculated balances for {len(balances)} people")
    return balances


def balances_by_id(balances: Iterable[PersonBalance]) -> Dict[int, float]:
    """Settlement input keyed by person id."""
    return {b.person_id: b.balance for b in balances}


def balances_by_name(balances: Iterable[PersonBalance]) -> Dict[str, float]:
    """Settlement input keyed by display name. Duplicate names collapse into one entry."""
    return {b.person_name: b.balance for b in balances}
