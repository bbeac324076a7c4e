from typing import Iterable, List, Optional
from datetime import date, datetime
from decimal import Decimal
import logging
import uuid
import pytz

import config
from accounting.chart_of_accounts import (
    ACCOUNTS_PAYABLE_ACCOUNT,
    ACCOUNTS_RECEIVABLE_ACCOUNT,
    CASH_ACCOUNT,
    LATE_FEE_INCOME_ACCOUNT,
    RENTAL_INCOME_ACCOUNT,
    SECURITY_DEPOSITS_HELD_ACCOUNT,
    SECURITY_DEPOSITS_PAYABLE_ACCOUNT,
    get_account_by_code,
    map_expense_category_to_account,
    map_payment_to_account,
)
from schemas.chart_of_accounts import VALID_ACCOUNT_TYPES
from schemas.expenses import Expense
from schemas.invoices import Invoice
from schemas.journal_entry import JournalEntry
from schemas.leases import Lease
from schemas.payments import Payment

logger = logging.getLogger(__name__)

# Account types whose balance grows with debits; the rest grow with credits.
DEBIT_NORMAL_ACCOUNT_TYPES = ("asset", "expense")

def _new_entry(
    tenant_id: str,
    transaction_date: date,
    description: str,
    account_code: str,
    entry_type: str,
    amount: Decimal,
    currency: str,
    transaction_type: str,
    created_by: str,
    reference_id: Optional[str] = None,
    reference_type: Optional[str] = None,
    property_id: Optional[str] = None,
    unit_id: Optional[str] = None,
    notes: Optional[str] = None,
) -> JournalEntry:
    return JournalEntry(
        id=f"je-{uuid.uuid4()}",
        tenant_id=tenant_id,
        transaction_date=transaction_date,
        transaction_type=transaction_type,
        reference_id=reference_id,
        reference_type=reference_type,
        description=description,
        account_code=account_code,
        entry_type=entry_type,
        amount=amount,
        currency=currency,
        property_id=property_id,
        unit_id=unit_id,
        notes=notes,
        created_by=created_by,
        created_at=datetime.now(pytz.timezone(config.APP_TIMEZONE)),
    )

def _balanced_pair(debit_account: str, credit_account: str, **posting) -> List[JournalEntry]:
    """Build a debit and a credit posting for the same amount and reference."""
    return [
        _new_entry(account_code=debit_account, entry_type="debit", **posting),
        _new_entry(account_code=credit_account, entry_type="credit", **posting),
    ]

def assign_account_code_to_expense(expense: Expense) -> str:
    if expense.account_code:
        return expense.account_code
    return map_expense_category_to_account(expense.category)

def assign_account_code_to_payment(payment: Payment) -> str:
    if payment.account_code:
        return payment.account_code
    return map_payment_to_account(payment.payment_type or "rent")

def create_payment_journal_entries(payment: Payment, lease: Lease, tenant_id: str, created_by: str) -> List[JournalEntry]:
    """
    Cash-basis postings for a rent payment.

    Only paid payments are recognised: Dr Cash / Cr the revenue account for
    the payment amount, plus a separate Dr Cash / Cr Late Fee Income pair when
    a late fee was collected.
    """
    if payment.status != "paid":
        logger.debug(f"No journal entries for payment {payment.id} with status '{payment.status}'")
        return []

    payment_type = payment.payment_type or "rent"
    posting = dict(
        tenant_id=tenant_id,
        transaction_date=payment.payment_date or payment.due_date,
        currency=payment.currency,
        transaction_type="payment",
        reference_id=payment.id,
        reference_type="payment",
        property_id=lease.property_id,
        unit_id=lease.unit_id,
        created_by=created_by,
    )

    entries = _balanced_pair(
        CASH_ACCOUNT,
        assign_account_code_to_payment(payment),
        description=f"Payment received - {payment_type}",
        amount=payment.amount,
        **posting,
    )

    if payment.late_fee and payment.late_fee > 0:
        entries.extend(_balanced_pair(
            CASH_ACCOUNT,
            LATE_FEE_INCOME_ACCOUNT,
            description="Late fee received",
            amount=payment.late_fee,
            **posting,
        ))

    return entries

def create_expense_journal_entries(expense: Expense, tenant_id: str, created_by: str) -> List[JournalEntry]:
    """
    Paid expenses are cash disbursements (Cr Cash); pending or approved
    expenses are accrued against Accounts Payable. Other statuses post nothing.
    """
    if expense.status == "paid":
        credit_account = CASH_ACCOUNT
        description = f"Expense - {expense.description}"
    elif expense.status in ("pending", "approved"):
        credit_account = ACCOUNTS_PAYABLE_ACCOUNT
        description = f"Expense accrued - {expense.description}"
    else:
        logger.debug(f"No journal entries for expense {expense.id} with status '{expense.status}'")
        return []

    return _balanced_pair(
        assign_account_code_to_expense(expense),
        credit_account,
        tenant_id=tenant_id,
        transaction_date=expense.expense_date,
        description=description,
        amount=expense.amount,
        currency=expense.currency,
        transaction_type="expense",
        reference_id=expense.id,
        reference_type="expense",
        property_id=expense.property_id,
        unit_id=expense.unit_id,
        notes=expense.vendor_name,
        created_by=created_by,
    )

def create_invoice_journal_entries(invoice: Invoice, tenant_id: str, created_by: str) -> List[JournalEntry]:
    # Paid invoices are represented by their payment, so only open invoices post.
    if invoice.status not in ("sent", "overdue"):
        logger.debug(f"No journal entries for invoice {invoice.invoice_number} with status '{invoice.status}'")
        return []

    posting = dict(
        tenant_id=tenant_id,
        transaction_date=invoice.invoice_date,
        amount=invoice.total_amount,
        currency=invoice.currency,
        transaction_type="invoice",
        reference_id=invoice.id,
        reference_type="invoice",
        property_id=invoice.property_id,
        unit_id=invoice.unit_id,
        created_by=created_by,
    )
    return [
        _new_entry(
            account_code=ACCOUNTS_RECEIVABLE_ACCOUNT,
            entry_type="debit",
            description=f"Invoice {invoice.invoice_number} - Accounts Receivable",
            **posting,
        ),
        _new_entry(
            account_code=RENTAL_INCOME_ACCOUNT,
            entry_type="credit",
            description=f"Invoice {invoice.invoice_number} - Rental Income",
            **posting,
        ),
    ]

def create_deposit_journal_entries(lease: Lease, tenant_id: str, created_by: str) -> List[JournalEntry]:
    """Security deposit held in trust at lease start, with the matching obligation to return it."""
    posting = dict(
        tenant_id=tenant_id,
        transaction_date=lease.start_date,
        amount=lease.deposit_amount,
        currency=lease.currency or config.DEFAULT_CURRENCY,
        transaction_type="deposit",
        reference_id=lease.id,
        reference_type="lease",
        property_id=lease.property_id,
        unit_id=lease.unit_id,
        created_by=created_by,
    )
    return [
        _new_entry(
            account_code=SECURITY_DEPOSITS_HELD_ACCOUNT,
            entry_type="debit",
            description=f"Security deposit received - Lease {lease.id}",
            **posting,
        ),
        _new_entry(
            account_code=SECURITY_DEPOSITS_PAYABLE_ACCOUNT,
            entry_type="credit",
            description=f"Security deposit liability - Lease {lease.id}",
            **posting,
        ),
    ]

def calculate_account_balance(entries: Iterable[JournalEntry], account_code: str, account_type: Optional[str] = None) -> Decimal:
    """
    Fold the postings of one account into its balance.

    Asset and expense accounts are debit-normal (debits add, credits subtract);
    liability, equity and revenue accounts are credit-normal. When no
    account_type is given it is looked up in the chart of accounts, and codes
    missing from the chart are treated as debit-normal. Raises ValueError for
    an account_type outside the five account types.
    """
    if account_type is None:
        account = get_account_by_code(account_code)
        account_type = account.account_type if account else "asset"
    elif account_type not in VALID_ACCOUNT_TYPES:
        raise ValueError(f"account_type must be one of {VALID_ACCOUNT_TYPES}")

    sign = Decimal(1) if account_type in DEBIT_NORMAL_ACCOUNT_TYPES else Decimal(-1)

    balance = Decimal(0)
    for entry in entries:
        if entry.account_code != account_code:
            continue
        if entry.entry_type == "debit":
            balance += sign * entry.amount
        else:
            balance -= sign * entry.amount
    return balance

def calculate_cash_balance(entries: Iterable[JournalEntry]) -> Decimal:
    return calculate_account_balance(entries, CASH_ACCOUNT, "asset")

def calculate_account_receivable_balance(entries: Iterable[JournalEntry]) -> Decimal:
    return calculate_account_balance(entries, ACCOUNTS_RECEIVABLE_ACCOUNT, "asset")
