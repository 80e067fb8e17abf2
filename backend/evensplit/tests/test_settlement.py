"""
Tests for settlement planning and transfer formatting.
"""
import re
import pytest
from evensplit.services.settlement_service import (
    Transfer, calculate_settlements, format_transfer, split_payments
)


def apply(balances, transfers):
    final = dict(balances)
    for t in transfers:
        final[t.debtor] += t.amount
        final[t.creditor] -= t.amount
    return final


class TestBasicScenarios:

    def test_fewer_than_two_people(self):
        assert calculate_settlements({}) == []
        assert calculate_settlements({"Alice": 100}) == []

    def test_two_people(self):
        result = calculate_settlements({"Alice": -50, "Bob": 50})
        assert result == [Transfer(debtor="Alice", creditor="Bob", amount=50)]

    def test_one_owes_two(self):
        """Charlie owes the most and pays Alice, who is owed the most, first."""
        result = calculate_settlements({"Alice": 30, "Bob": 20, "Charlie": -50})
        assert result == [
            Transfer(debtor="Charlie", creditor="Alice", amount=30),
            Transfer(debtor="Charlie", creditor="Bob", amount=20),
        ]

    def test_two_owe_one(self):
        result = calculate_settlements({"Alice": -30, "Bob": -20, "Charlie": 50})
        assert result == [
            Transfer(debtor="Alice", creditor="Charlie", amount=30),
            Transfer(debtor="Bob", creditor="Charlie", amount=20),
        ]


class TestComplexScenarios:

    def test_one_debtor_pays_everyone(self):
        balances = {"Antje": 197.75, "Flo": 306.75, "Jose": 97.75, "Tobi": -602.25}
        result = calculate_settlements(balances)
        assert len(result) == 3
        assert all(t.debtor == "Tobi" for t in result)
        assert sum(t.amount for t in result) == pytest.approx(602.25, abs=0.005)

    def test_expense_splitting_scenario(self):
        result = calculate_settlements({"Flo": -55, "Miki": 200, "Denise": -145})
        assert len(result) == 2
        assert all(t.creditor == "Miki" for t in result)
        assert sum(t.amount for t in result) == pytest.approx(200)

    def test_pairs_are_matched_directly(self):
        result = calculate_settlements({"A": -100, "B": -100, "C": 100, "D": 100})
        assert len(result) == 2

    def test_settled_person_is_skipped(self):
        result = calculate_settlements({"A": -100, "B": 0, "C": 100})
        assert result == [Transfer(debtor="A", creditor="C", amount=100)]

    def test_keyed_by_id(self):
        """Ids avoid collisions between people sharing a name."""
        result = calculate_settlements({1: -20, 2: 20})
        assert result == [Transfer(debtor=1, creditor=2, amount=20)]

    def test_equal_balances_keep_input_order(self):
        result = calculate_settlements({"B": -10, "A": -10, "C": 20})
        assert [t.debtor for t in result] == ["B", "A"]


class TestEdgeCases:

    def test_all_zero(self):
        assert calculate_settlements({"Alice": 0, "Bob": 0, "Charlie": 0}) == []

    def test_floating_point_thirds(self):
        result = calculate_settlements({"Alice": -33.33, "Bob": -33.33, "Charlie": 66.66})
        assert len(result) == 2
        assert sum(t.amount for t in result) == pytest.approx(66.66)

    def test_one_cent(self):
        result = calculate_settlements({"Alice": -0.01, "Bob": 0.01})
        assert len(result) == 1
        assert result[0].amount == 0.01

    def test_large_amounts(self):
        result = calculate_settlements({"Alice": -10000, "Bob": 10000})
        assert result == [Transfer(debtor="Alice", creditor="Bob", amount=10000)]

    def test_unbalanced_leftover_is_dropped(self):
        result = calculate_settlements({"Alice": -50, "Bob": 80})
        assert result == [Transfer(debtor="Alice", creditor="Bob", amount=50)]

    def test_nan_balance_is_treated_as_settled(self):
        assert calculate_settlements({"A": float("nan"), "B": 1.0}) == []

    def test_infinite_balances_are_treated_as_settled(self):
        result = calculate_settlements({
            "A": float("-inf"), "B": -20, "C": float("inf"), "D": 20
        })
        assert result == [Transfer(debtor="B", creditor="D", amount=20)]


class TestBalanceVerification:

    def test_transfers_zero_every_balance(self):
        balances = {"Alice": -150, "Bob": 75, "Charlie": -25, "Diana": 100}
        result = calculate_settlements(balances)
        for balance in apply(balances, result).values():
            assert abs(balance) < 0.01

    def test_at_most_n_minus_one_transfers(self):
        balances = {"A": -12.5, "B": -7.25, "C": 3.1, "D": 9.4, "E": 7.25}
        result = calculate_settlements(balances)
        assert len(result) <= len(balances) - 1
        assert all(t.amount > 0 for t in result)
        for balance in apply(balances, result).values():
            assert abs(balance) < 0.01


class TestFormatTransfer:

    def test_whole_amount(self):
        assert format_transfer(Transfer("Alice", "Bob", 50)) == "Alice owes Bob 50.00€"

    def test_truncates_to_two_decimals(self):
        assert format_transfer(Transfer("Alice", "Bob", 33.333)) == "Alice owes Bob 33.33€"

    def test_hundred(self):
        assert format_transfer(Transfer("Alice", "Bob", 100)) == "Alice owes Bob 100.00€"

    def test_names_lookup_for_ids(self):
        names = {1: "Alice", 2: "Bob"}
        assert format_transfer(Transfer(1, 2, 12.5), names) == "Alice owes Bob 12.50€"


class TestSplitPayments:

    def test_leading_space(self):
        assert split_payments({"Alice": -50, "Bob": 50}) == [" Alice owes Bob 50.00€"]

    def test_legacy_format(self):
        result = split_payments({"Antje": 197.75, "Flo": 306.75, "Jose": 97.75, "Tobi": -602.25})
        assert len(result) == 3
        assert re.match(r"^ Tobi owes \w+ \d+\.\d{2}€$", result[0])
