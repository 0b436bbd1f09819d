"""Tests for the balance domain service."""

import itertools
import pytest
from datetime import date
from decimal import Decimal

from ledgepro.database.memory import InMemoryStore
from ledgepro.domain.balance import BalanceService
from ledgepro.domain.entities import AggregateStats
from ledgepro.domain.errors import UnresolvedReferenceError, ValidationError
from ledgepro.domain.store import EntityStore


def _balances(entries):
    return [entry.balance_after for entry in entries]


class TestRunningLedger:
    """Tests for running ledgers."""

    def test_opening_balance_then_credit_and_debit(self, store, balance_service, sample_customer):
        store.add_transaction(sample_customer.id, "2024-01-01", "Payment", "CREDIT", "500")
        store.add_transaction(sample_customer.id, "2024-01-02", "Invoice", "DEBIT", "200")

        entries = balance_service.running_ledger(sample_customer.id)

        assert _balances(entries) == [Decimal("1500"), Decimal("1300")]
        assert balance_service.customer_balance(sample_customer.id) == Decimal("1300")

    def test_same_date_keeps_insertion_order(self, store, balance_service, sample_customer):
        first = store.add_transaction(sample_customer.id, "2024-02-01", "", "CREDIT", "100")
        second = store.add_transaction(sample_customer.id, "2024-02-01", "", "DEBIT", "50")

        entries = balance_service.running_ledger(sample_customer.id)

        assert [e.transaction for e in entries] == [first, second]
        assert _balances(entries) == [Decimal("1100"), Decimal("1050")]

    def test_sorted_by_date_not_insertion(self, store, balance_service, sample_customer):
        late = store.add_transaction(sample_customer.id, "2024-03-05", "", "DEBIT", "300")
        early = store.add_transaction(sample_customer.id, "2024-03-01", "", "CREDIT", "100")

        entries = balance_service.running_ledger(sample_customer.id)

        assert [e.transaction for e in entries] == [early, late]
        assert _balances(entries) == [Decimal("1100"), Decimal("800")]

    def test_only_includes_own_transactions(self, store, balance_service, sample_company, sample_customer):
        other = store.add_customer(sample_company.id, "Other")
        store.add_transaction(other.id, "2024-01-01", "", "CREDIT", "999")
        store.add_transaction(sample_customer.id, "2024-01-01", "", "DEBIT", "1")

        entries = balance_service.running_ledger(sample_customer.id)

        assert len(entries) == 1
        assert _balances(entries) == [Decimal("999")]

    def test_no_transactions(self, balance_service, sample_customer):
        assert balance_service.running_ledger(sample_customer.id) == []
        assert balance_service.customer_balance(sample_customer.id) == Decimal("1000")

    def test_unknown_customer(self, balance_service):
        with pytest.raises(UnresolvedReferenceError):
            balance_service.running_ledger("missing")
        with pytest.raises(UnresolvedReferenceError):
            balance_service.customer_balance("missing")

    def test_delete_shifts_subsequent_balances(self, store, balance_service, sample_customer):
        store.add_transaction(sample_customer.id, "2024-01-01", "", "CREDIT", "100")
        middle = store.add_transaction(sample_customer.id, "2024-01-02", "", "DEBIT", "40")
        store.add_transaction(sample_customer.id, "2024-01-03", "", "CREDIT", "10")
        assert _balances(balance_service.running_ledger(sample_customer.id)) == [
            Decimal("1100"),
            Decimal("1060"),
            Decimal("1070"),
        ]

        store.delete_transaction(middle.id)

        entries = balance_service.running_ledger(sample_customer.id)
        assert middle not in [e.transaction for e in entries]
        assert _balances(entries) == [Decimal("1100"), Decimal("1110")]


PERMUTATION_TXNS = [
    ("2024-01-03", "CREDIT", "250.25"),
    ("2024-01-01", "DEBIT", "75"),
    ("2024-01-03", "DEBIT", "10.10"),
    ("2024-01-02", "CREDIT", "5"),
]


@pytest.mark.parametrize("order", list(itertools.permutations(range(len(PERMUTATION_TXNS)))))
def test_balance_matches_last_running_balance_for_any_order(order):
    entity_store = EntityStore(InMemoryStore())
    company = entity_store.add_company(name="Acme")
    customer = entity_store.add_customer(company.id, "Ravi", opening_balance_text="-20")
    for index in order:
        txn_date, txn_type, amount = PERMUTATION_TXNS[index]
        entity_store.add_transaction(customer.id, txn_date, "", txn_type, amount)

    service = BalanceService(entity_store)
    entries = service.running_ledger(customer.id)

    assert entries[-1].balance_after == service.customer_balance(customer.id)
    assert service.customer_balance(customer.id) == Decimal("150.15")


class TestCustomerTotals:
    """Tests for per-customer totals."""

    def test_totals(self, store, balance_service, sample_customer):
        store.add_transaction(sample_customer.id, "2024-01-01", "", "CREDIT", "500")
        store.add_transaction(sample_customer.id, "2024-01-02", "", "DEBIT", "200")
        store.add_transaction(sample_customer.id, "2024-01-03", "", "DEBIT", "50")

        totals = balance_service.customer_totals(sample_customer.id)

        assert totals.opening_balance == Decimal("1000")
        assert totals.total_credit == Decimal("500")
        assert totals.total_debit == Decimal("250")
        assert totals.balance == Decimal("1250")


class TestAggregateStats:
    """Tests for book-wide statistics."""

    def test_stats_span_all_customers(self, store, balance_service, sample_company, sample_customer):
        second_company = store.add_company(name="Second")
        other = store.add_customer(second_company.id, "Other", opening_balance_text="5000")
        store.add_transaction(sample_customer.id, "2024-01-01", "", "CREDIT", "500")
        store.add_transaction(other.id, "2024-01-01", "", "DEBIT", "200")
        store.add_transaction(other.id, "2024-01-02", "", "CREDIT", "25")

        stats = balance_service.aggregate_stats()

        assert stats == AggregateStats(
            total_balance=Decimal("325"),
            total_debit=Decimal("200"),
            total_credit=Decimal("525"),
            company_count=2,
            customer_count=2,
        )

    def test_stats_after_wipe_are_zero(self, store, balance_service, sample_customer):
        store.add_transaction(sample_customer.id, "2024-01-01", "", "CREDIT", "500")
        store.wipe()

        assert balance_service.aggregate_stats() == AggregateStats(
            total_balance=Decimal("0"),
            total_debit=Decimal("0"),
            total_credit=Decimal("0"),
            company_count=0,
            customer_count=0,
        )


class TestTrend:
    """Tests for daily trend buckets."""

    def test_empty_window(self, balance_service):
        buckets = balance_service.trend(3, date(2024, 3, 10))

        assert [b.date for b in buckets] == [date(2024, 3, 8), date(2024, 3, 9), date(2024, 3, 10)]
        assert all(b.debit == 0 and b.credit == 0 for b in buckets)

    def test_buckets_sum_by_exact_day(self, store, balance_service, sample_company, sample_customer):
        other = store.add_customer(sample_company.id, "Other")
        store.add_transaction(sample_customer.id, "2024-03-09", "", "CREDIT", "100")
        store.add_transaction(other.id, "2024-03-09", "", "CREDIT", "50")
        store.add_transaction(other.id, "2024-03-09", "", "DEBIT", "30")
        store.add_transaction(sample_customer.id, "2024-03-10", "", "DEBIT", "5")
        # Outside the window on both sides
        store.add_transaction(sample_customer.id, "2024-03-07", "", "CREDIT", "1000")
        store.add_transaction(sample_customer.id, "2024-03-11", "", "CREDIT", "1000")

        buckets = balance_service.trend(3, date(2024, 3, 10))

        assert [(b.debit, b.credit) for b in buckets] == [
            (Decimal("0"), Decimal("0")),
            (Decimal("30"), Decimal("150")),
            (Decimal("5"), Decimal("0")),
        ]

    def test_window_crosses_month_boundary(self, balance_service):
        buckets = balance_service.trend(2, date(2024, 3, 1))
        assert [b.label for b in buckets] == ["29/02", "01/03"]

    def test_defaults_to_seven_days_ending_today(self, balance_service):
        buckets = balance_service.trend()
        assert len(buckets) == 7
        assert buckets[-1].date == date.today()

    @pytest.mark.parametrize("days", [0, -1])
    def test_invalid_window(self, balance_service, days):
        with pytest.raises(ValidationError):
            balance_service.trend(days, date(2024, 3, 10))
