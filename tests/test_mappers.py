"""Tests for persisted record mappers."""

import pytest
from datetime import date
from decimal import Decimal

from ledgepro.database.mappers import (
    company_from_record,
    company_to_record,
    customer_from_record,
    customer_to_record,
    transaction_from_record,
    transaction_to_record,
)
from ledgepro.domain.entities import Company, Customer, Transaction, TransactionType
from ledgepro.domain.errors import ValidationError


class TestCompanyMapper:
    """Tests for Company mapper."""

    def test_company_to_record(self):
        company = Company(id="c1", name="Acme", address="Pune", gst_number="GST1", financial_year="2025-26")
        assert company_to_record(company) == {
            "id": "c1",
            "name": "Acme",
            "address": "Pune",
            "gstNumber": "GST1",
            "financialYear": "2025-26",
        }

    def test_company_from_record_accepts_gst_alias(self):
        """Test records written with the short 'gst' key still load."""
        company = company_from_record({"id": "c1", "name": "Acme", "address": "", "gst": "GST9", "financialYear": "2024-25"})
        assert company.gst_number == "GST9"

    def test_company_from_record_empty_gst_is_none(self):
        company = company_from_record({"id": "c1", "name": "Acme", "gst": ""})
        assert company.gst_number is None
        assert company.financial_year == "2024-25"

    def test_company_from_record_missing_name(self):
        with pytest.raises(ValidationError, match="name"):
            company_from_record({"id": "c1"})

    def test_company_from_record_not_an_object(self):
        with pytest.raises(ValidationError, match="must be an object"):
            company_from_record(["c1", "Acme"])


class TestCustomerMapper:
    """Tests for Customer mapper."""

    def test_customer_to_record_writes_balance_as_number(self):
        customer = Customer(id="u1", company_id="c1", name="Ravi", opening_balance=Decimal("-250.75"))
        record = customer_to_record(customer)
        assert record["companyId"] == "c1"
        assert record["openingBalance"] == -250.75

    def test_customer_from_record_accepts_numbers(self):
        """Test numeric opening balances (as written by older exports) are read exactly."""
        customer = customer_from_record(
            {"id": "u1", "companyId": "c1", "name": "Ravi", "phone": "1", "address": "", "openingBalance": 1000.5}
        )
        assert customer.opening_balance == Decimal("1000.5")

    def test_customer_from_record_defaults_opening_balance(self):
        customer = customer_from_record({"id": "u1", "companyId": "c1", "name": "Ravi"})
        assert customer.opening_balance == Decimal("0")
        assert customer.phone == ""

    def test_customer_from_record_rejects_non_numeric_balance(self):
        with pytest.raises(ValidationError, match="openingBalance"):
            customer_from_record({"id": "u1", "companyId": "c1", "name": "Ravi", "openingBalance": "lots"})


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_transaction_to_record(self):
        txn = Transaction(
            id="t1",
            customer_id="u1",
            date=date(2024, 1, 5),
            description="Invoice 12",
            type=TransactionType.DEBIT,
            amount=Decimal("200.00"),
        )
        assert transaction_to_record(txn) == {
            "id": "t1",
            "customerId": "u1",
            "date": "2024-01-05",
            "description": "Invoice 12",
            "type": "DEBIT",
            "amount": 200,
        }

    def test_transaction_from_record(self):
        txn = transaction_from_record(
            {"id": "t1", "customerId": "u1", "date": "2024-01-05", "description": "x", "type": "CREDIT", "amount": 500}
        )
        assert txn.date == date(2024, 1, 5)
        assert txn.type == TransactionType.CREDIT
        assert txn.amount == Decimal("500")

    def test_transaction_from_record_bad_type(self):
        with pytest.raises(ValidationError, match="DEBIT or CREDIT"):
            transaction_from_record(
                {"id": "t1", "customerId": "u1", "date": "2024-01-05", "type": "REFUND", "amount": 5}
            )

    def test_transaction_from_record_bad_date(self):
        with pytest.raises(ValidationError, match="Invalid date"):
            transaction_from_record(
                {"id": "t1", "customerId": "u1", "date": "05/01/2024", "type": "DEBIT", "amount": 5}
            )

    def test_transaction_from_record_missing_amount(self):
        with pytest.raises(ValidationError, match="amount"):
            transaction_from_record({"id": "t1", "customerId": "u1", "date": "2024-01-05", "type": "DEBIT"})

    @pytest.mark.parametrize("amount", [0, -5, "-0.01"])
    def test_transaction_from_record_rejects_non_positive_amount(self, amount):
        with pytest.raises(ValidationError, match="must be positive"):
            transaction_from_record(
                {"id": "t1", "customerId": "u1", "date": "2024-01-05", "type": "DEBIT", "amount": amount}
            )

    def test_fractional_amount_written_as_number_reads_back_exactly(self):
        txn = Transaction(
            id="t1",
            customer_id="u1",
            date=date(2024, 1, 5),
            description="",
            type=TransactionType.CREDIT,
            amount=Decimal("75.25"),
        )
        record = transaction_to_record(txn)

        assert record["amount"] == 75.25
        assert transaction_from_record(record).amount == Decimal("75.25")
