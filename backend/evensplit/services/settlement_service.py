"""
Settlement service: minimal set of transfers that settles all balances.
"""
import logging
import math
from dataclasses import dataclass
from typing import Generic, Hashable, List, Mapping, Optional, TypeVar

from evensplit.core.utils import cents_to_amount, format_amount, to_cents

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)


@dataclass(frozen=True)
class Transfer(Generic[K]):
    """A single payment from a debtor to a creditor, in major units."""
    debtor: K
    creditor: K
    amount: float


def calculate_settlements(balances: Mapping[K, float]) -> List[Transfer[K]]:
    """
    Calculate the minimum number of transfers needed to settle all debts.

    Uses a greedy two-pointer match: people are sorted from the biggest
    debtor to the biggest creditor, the debtor at the front pays the
    creditor at the back the smaller of the two open amounts, and the
    cursor of whoever is settled moves inwards.

    Keys may be person ids or names; transfers carry the same keys.
    Balances are expected to sum to zero. Any leftover is dropped.
    NaN and infinite balances are treated as settled.
    """
    if len(balances) < 2:
        return []

    finite = [(key, balance) for key, balance in balances.items() if math.isfinite(balance)]
    if len(finite) < len(balances):
        logger.warning(f"Ignoring {len(balances) - len(finite)} non-finite balances")

    # Stable sort keeps input order for equal balances
    ordered = sorted(finite, key=lambda item: item[1])
    keys = [key for key, _ in ordered]
    # Work in cents so "settled" is an exact comparison
    remaining = [to_cents(balance) for _, balance in ordered]

    transfers: List[Transfer[K]] = []
    debtor_idx = 0
    creditor_idx = len(ordered) - 1

    while debtor_idx < creditor_idx:
        amount_owed = -remaining[debtor_idx]
        amount_receivable = remaining[creditor_idx]

        if amount_owed <= 0:
            debtor_idx += 1
            continue
        if amount_receivable <= 0:
            creditor_idx -= 1
            continue

        transfer_cents = min(amount_owed, amount_receivable)
        transfers.append(Transfer(
            debtor=keys[debtor_idx],
            creditor=keys[creditor_idx],
            amount=cents_to_amount(transfer_cents)
        ))

        remaining[debtor_idx] += transfer_cents
        remaining[creditor_idx] -= transfer_cents

        if remaining[debtor_idx] == 0:
            debtor_idx += 1
        if remaining[creditor_idx] == 0:
            creditor_idx -= 1

    logger.debug(f"Planned {len(transfers)} transfers for {len(balances)} balances")
    return transfers


def format_transfer(transfer: Transfer, names: Optional[Mapping] = None) -> str:
    """
    Format a transfer as "<from> owes <to> X.XX€".

    `names` maps transfer keys to display names; keys without an entry
    are rendered as-is.
    """
    names = names or {}
    debtor = names.get(transfer.debtor, transfer.debtor)
    creditor = names.get(transfer.creditor, transfer.creditor)
    return f"{debtor} owes {creditor} {format_amount(transfer.amount)}"


def legacy_lines(transfers: List[Transfer]) -> List[str]:
    """Format transfers in the legacy layout: every line starts with a single space."""
    return [f" {format_transfer(t)}" for t in transfers]


def split_payments(balances: Mapping[str, float]) -> List[str]:
    """Calculate settlements and return them as legacy formatted strings."""
    return legacy_lines(calculate_settlements(balances))
