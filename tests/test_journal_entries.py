"""
Property Ledger - Journal Entry Factory Tests

Postings generated from business events, and balances folded from them.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal

import pytest

from accounting.journal_entries import (
    assign_account_code_to_expense,
    assign_account_code_to_payment,
    calculate_account_balance,
    calculate_account_receivable_balance,
    calculate_cash_balance,
    create_deposit_journal_entries,
    create_expense_journal_entries,
    create_invoice_journal_entries,
    create_payment_journal_entries,
)
from conftest import TENANT_ID, USER_ID, make_expense, make_invoice, make_lease, make_payment


def assert_balanced_by_reference(entries):
    """Debits equal credits within every reference group."""
    debits = defaultdict(Decimal)
    credits = defaultdict(Decimal)
    for entry in entries:
        key = (entry.reference_type, entry.reference_id)
        if entry.entry_type == "debit":
            debits[key] += entry.amount
        else:
            credits[key] += entry.amount
    assert set(debits) == set(credits)
    for key in debits:
        assert debits[key] == credits[key], key


def postings(entries):
    return [(e.account_code, e.entry_type, e.amount) for e in entries]


class TestPaymentEntries:

    def test_paid_rent_debits_cash_and_credits_rental_income(self):
        entries = create_payment_journal_entries(make_payment(), make_lease(), TENANT_ID, USER_ID)

        assert postings(entries) == [
            ("1000", "debit", Decimal("1000")),
            ("4000", "credit", Decimal("1000")),
        ]
        assert_balanced_by_reference(entries)

    def test_entries_carry_reference_and_dimensions(self):
        entries = create_payment_journal_entries(make_payment(), make_lease(), TENANT_ID, USER_ID)

        for entry in entries:
            assert entry.tenant_id == TENANT_ID
            assert entry.created_by == USER_ID
            assert entry.transaction_type == "payment"
            assert entry.reference_id == "pay-1"
            assert entry.reference_type == "payment"
            assert entry.property_id == "prop-1"
            assert entry.unit_id == "unit-1"
            assert entry.transaction_date == date(2024, 3, 5)
            assert entry.currency == "SCR"
            assert entry.created_at.tzinfo is not None
        assert len({entry.id for entry in entries}) == 2

    def test_late_fee_gets_its_own_balanced_pair(self):
        payment = make_payment(late_fee=Decimal("50"))

        entries = create_payment_journal_entries(payment, make_lease(), TENANT_ID, USER_ID)

        assert postings(entries) == [
            ("1000", "debit", Decimal("1000")),
            ("4000", "credit", Decimal("1000")),
            ("1000", "debit", Decimal("50")),
            ("4100", "credit", Decimal("50")),
        ]
        assert {entry.reference_id for entry in entries} == {"pay-1"}
        assert_balanced_by_reference(entries)

    @pytest.mark.parametrize("status", ["pending", "overdue", "partial", "cancelled"])
    def test_unpaid_payments_post_nothing(self, status):
        payment = make_payment(status=status, late_fee=Decimal("50"))

        assert create_payment_journal_entries(payment, make_lease(), TENANT_ID, USER_ID) == []

    def test_payment_type_selects_revenue_account(self):
        payment = make_payment(payment_type="parking")

        entries = create_payment_journal_entries(payment, make_lease(), TENANT_ID, USER_ID)

        assert entries[1].account_code == "4200"
        assert entries[0].description == "Payment received - parking"

    def test_explicit_account_code_overrides_mapping(self):
        payment = make_payment(payment_type="parking", account_code="4900")

        entries = create_payment_journal_entries(payment, make_lease(), TENANT_ID, USER_ID)

        assert entries[1].account_code == "4900"


class TestExpenseEntries:

    def test_paid_expense_is_a_cash_disbursement(self):
        entries = create_expense_journal_entries(make_expense(vendor_name="Plumb Co"), TENANT_ID, USER_ID)

        assert postings(entries) == [
            ("5000", "debit", Decimal("200")),
            ("1000", "credit", Decimal("200")),
        ]
        assert entries[0].description == "Expense - Fix leaking tap"
        assert all(entry.notes == "Plumb Co" for entry in entries)
        assert_balanced_by_reference(entries)

    @pytest.mark.parametrize("status", ["pending", "approved"])
    def test_unpaid_expense_is_accrued_to_payables(self, status):
        entries = create_expense_journal_entries(make_expense(status=status, category="utilities"), TENANT_ID, USER_ID)

        assert postings(entries) == [
            ("5100", "debit", Decimal("200")),
            ("2000", "credit", Decimal("200")),
        ]
        assert entries[0].description == "Expense accrued - Fix leaking tap"
        assert_balanced_by_reference(entries)

    @pytest.mark.parametrize("status", ["rejected", "cancelled", "draft"])
    def test_other_statuses_post_nothing(self, status):
        assert create_expense_journal_entries(make_expense(status=status), TENANT_ID, USER_ID) == []

    def test_unknown_category_posts_to_miscellaneous(self):
        entries = create_expense_journal_entries(make_expense(category="pest_control"), TENANT_ID, USER_ID)

        assert entries[0].account_code == "6900"


class TestInvoiceEntries:

    @pytest.mark.parametrize("status", ["sent", "overdue"])
    def test_open_invoice_raises_receivable(self, status):
        entries = create_invoice_journal_entries(make_invoice(status=status), TENANT_ID, USER_ID)

        assert postings(entries) == [
            ("1100", "debit", Decimal("1000")),
            ("4000", "credit", Decimal("1000")),
        ]
        assert entries[0].description == "Invoice INV-0001 - Accounts Receivable"
        assert entries[1].description == "Invoice INV-0001 - Rental Income"
        assert_balanced_by_reference(entries)

    @pytest.mark.parametrize("status", ["draft", "paid", "cancelled"])
    def test_other_invoices_post_nothing(self, status):
        assert create_invoice_journal_entries(make_invoice(status=status), TENANT_ID, USER_ID) == []


class TestDepositEntries:

    def test_deposit_held_against_matching_liability(self):
        entries = create_deposit_journal_entries(make_lease(), TENANT_ID, USER_ID)

        assert postings(entries) == [
            ("1200", "debit", Decimal("2000")),
            ("2100", "credit", Decimal("2000")),
        ]
        assert all(entry.transaction_date == date(2024, 1, 1) for entry in entries)
        assert all(entry.reference_type == "lease" for entry in entries)
        assert_balanced_by_reference(entries)

    def test_deposit_uses_default_currency_when_lease_has_none(self):
        entries = create_deposit_journal_entries(make_lease(), TENANT_ID, USER_ID)

        assert {entry.currency for entry in entries} == {"SCR"}

    def test_deposit_uses_lease_currency(self):
        entries = create_deposit_journal_entries(make_lease(currency="EUR"), TENANT_ID, USER_ID)

        assert {entry.currency for entry in entries} == {"EUR"}


class TestAccountAssignment:

    def test_expense_explicit_code_wins(self):
        assert assign_account_code_to_expense(make_expense(account_code="5800")) == "5800"

    def test_expense_falls_back_to_category(self):
        assert assign_account_code_to_expense(make_expense(category="insurance")) == "5200"

    def test_payment_defaults_to_rent(self):
        assert assign_account_code_to_payment(make_payment()) == "4000"

    def test_payment_explicit_code_wins(self):
        assert assign_account_code_to_payment(make_payment(account_code="4300")) == "4300"


class TestBalances:

    def _ledger(self):
        entries = []
        entries += create_payment_journal_entries(make_payment(late_fee=Decimal("50")), make_lease(), TENANT_ID, USER_ID)
        entries += create_expense_journal_entries(make_expense(), TENANT_ID, USER_ID)
        entries += create_expense_journal_entries(make_expense(id="exp-2", status="pending", amount=Decimal("75")), TENANT_ID, USER_ID)
        entries += create_invoice_journal_entries(make_invoice(), TENANT_ID, USER_ID)
        entries += create_deposit_journal_entries(make_lease(), TENANT_ID, USER_ID)
        return entries

    def test_every_reference_group_balances(self):
        assert_balanced_by_reference(self._ledger())

    def test_cash_balance(self):
        # 1000 rent + 50 late fee - 200 paid expense
        assert calculate_cash_balance(self._ledger()) == Decimal("850")

    def test_receivable_balance(self):
        assert calculate_account_receivable_balance(self._ledger()) == Decimal("1000")

    def test_liability_balance_is_credit_normal(self):
        ledger = self._ledger()

        assert calculate_account_balance(ledger, "2000") == Decimal("75")
        assert calculate_account_balance(ledger, "2100", "liability") == Decimal("2000")

    def test_revenue_balance_is_credit_normal(self):
        # 1000 from the payment plus 1000 from the open invoice
        assert calculate_account_balance(self._ledger(), "4000") == Decimal("2000")

    def test_expense_balance_is_debit_normal(self):
        assert calculate_account_balance(self._ledger(), "5000") == Decimal("275")

    def test_explicit_account_type_sets_the_sign(self):
        ledger = self._ledger()

        assert calculate_account_balance(ledger, "1000", "asset") == Decimal("850")
        assert calculate_account_balance(ledger, "1000", "liability") == Decimal("-850")

    @pytest.mark.parametrize("account_type", ["Asset", "assets", ""])
    def test_unknown_account_type_is_rejected(self, account_type):
        with pytest.raises(ValueError):
            calculate_account_balance(self._ledger(), "1000", account_type)

    def test_empty_ledger(self):
        assert calculate_cash_balance([]) == Decimal("0")

    def test_trial_balance_nets_to_zero(self):
        """Debit-normal balances equal credit-normal balances across the whole ledger."""
        ledger = self._ledger()
        codes = {entry.account_code for entry in ledger}

        debit_side = sum(
            calculate_account_balance(ledger, code) for code in codes if code[0] in "156"
        )
        credit_side = sum(
            calculate_account_balance(ledger, code) for code in codes if code[0] in "234"
        )
        assert debit_side == credit_side
