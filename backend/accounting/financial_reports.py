"""
Financial statements computed directly from source records.

None of these generators reads journal entries: every figure is recomputed
from payments, expenses, leases and units, so reports stay available for
records whose postings were never persisted.
"""

from typing import Dict, List, Optional, Sequence
from datetime import date
from decimal import Decimal
import logging

from accounting.chart_of_accounts import (
    LATE_FEE_INCOME_ACCOUNT,
    RENTAL_INCOME_ACCOUNT,
    get_account_name,
    map_expense_category_to_account,
)
from schemas.expenses import Expense
from schemas.financial_reports import (
    Assets,
    BalanceSheet,
    CashFlowStatement,
    CurrentAssets,
    CurrentLiabilities,
    Equity,
    FinancingActivities,
    IncomeStatement,
    InvestingActivities,
    Liabilities,
    OperatingActivities,
    OperatingExpenses,
    PropertyPerformance,
    ReportPeriod,
    Revenue,
    TransactionSummary,
    TransactionSummaryLine,
    WorkingCapitalAdjustments,
)
from schemas.leases import Lease
from schemas.payments import Payment
from schemas.units import Unit

logger = logging.getLogger(__name__)

ZERO = Decimal(0)

# Categories with their own income statement line; everything else is "other".
MAINTENANCE_CATEGORIES = ("maintenance", "repairs")
ITEMISED_EXPENSE_CATEGORIES = MAINTENANCE_CATEGORIES + ("utilities", "insurance", "taxes")

def _in_period(value: Optional[date], start_date: date, end_date: date) -> bool:
    return value is not None and start_date <= value <= end_date

def _late_fee(payment: Payment) -> Decimal:
    return payment.late_fee or ZERO

def _paid_payments_in_period(payments: Sequence[Payment], start_date: date, end_date: date) -> List[Payment]:
    return [
        p for p in payments
        if p.status == "paid" and _in_period(p.payment_date, start_date, end_date)
    ]

def _expenses_in_period(expenses: Sequence[Expense], start_date: date, end_date: date) -> List[Expense]:
    return [e for e in expenses if _in_period(e.expense_date, start_date, end_date)]

def generate_income_statement(payments: Sequence[Payment], expenses: Sequence[Expense], start_date: date, end_date: date) -> IncomeStatement:
    """
    Revenue from paid payments dated inside the period; expenses dated inside
    the period regardless of their status (accrual view).
    """
    logger.info(f"Generating income statement for {start_date} to {end_date}")
    period_payments = _paid_payments_in_period(payments, start_date, end_date)
    period_expenses = _expenses_in_period(expenses, start_date, end_date)

    rental_income = sum((p.amount for p in period_payments), ZERO)
    late_fees = sum((_late_fee(p) for p in period_payments), ZERO)
    other_income = ZERO
    total_revenue = rental_income + late_fees + other_income

    expenses_by_category: Dict[str, Decimal] = {}
    for expense in period_expenses:
        expenses_by_category[expense.category] = expenses_by_category.get(expense.category, ZERO) + expense.amount

    maintenance = sum((expenses_by_category.get(c, ZERO) for c in MAINTENANCE_CATEGORIES), ZERO)
    utilities = expenses_by_category.get("utilities", ZERO)
    insurance = expenses_by_category.get("insurance", ZERO)
    taxes = expenses_by_category.get("taxes", ZERO)
    management = ZERO  # no management fee category is tracked yet
    other = sum(
        (amount for category, amount in expenses_by_category.items() if category not in ITEMISED_EXPENSE_CATEGORIES),
        ZERO,
    )
    total_expenses = maintenance + utilities + insurance + taxes + management + other

    net_income = total_revenue - total_expenses
    profit_margin = (net_income / total_revenue) * 100 if total_revenue > 0 else ZERO

    return IncomeStatement(
        period=ReportPeriod(start=start_date, end=end_date),
        revenue=Revenue(
            rental_income=rental_income,
            late_fees=late_fees,
            other_income=other_income,
            total_revenue=total_revenue,
        ),
        expenses=OperatingExpenses(
            maintenance=maintenance,
            utilities=utilities,
            insurance=insurance,
            taxes=taxes,
            management=management,
            other=other,
            total_expenses=total_expenses,
        ),
        net_income=net_income,
        profit_margin=profit_margin,
    )

def generate_balance_sheet(payments: Sequence[Payment], expenses: Sequence[Expense], leases: Sequence[Lease], as_of_date: date) -> BalanceSheet:
    """
    Point-in-time position as of a date.

    Cash and owner's equity are reported as zero: there is no independent cash
    position or capital contribution record to derive them from.
    """
    logger.info(f"Generating balance sheet as of {as_of_date}")

    # 1. Assets
    accounts_receivable = sum(
        (p.amount + _late_fee(p) for p in payments if p.status == "overdue" and p.due_date <= as_of_date),
        ZERO,
    )
    security_deposits = sum(
        (l.deposit_amount or ZERO for l in leases if l.status == "active" and l.start_date <= as_of_date),
        ZERO,
    )
    cash = ZERO
    current_assets = CurrentAssets(
        cash=cash,
        accounts_receivable=accounts_receivable,
        security_deposits=security_deposits,
        total=cash + accounts_receivable + security_deposits,
    )

    # 2. Liabilities
    accounts_payable = sum(
        (e.amount for e in expenses if e.status == "pending" and e.expense_date <= as_of_date),
        ZERO,
    )
    # Paid ahead of a due date that has not arrived yet
    prepaid_rent = sum(
        (
            p.amount for p in payments
            if p.status == "paid"
            and p.payment_date is not None
            and p.payment_date < p.due_date
            and p.due_date > as_of_date
        ),
        ZERO,
    )
    current_liabilities = CurrentLiabilities(
        accounts_payable=accounts_payable,
        security_deposits_payable=security_deposits,
        prepaid_rent=prepaid_rent,
        total=accounts_payable + security_deposits + prepaid_rent,
    )

    # 3. Equity, all-time up to the cutoff
    total_income = sum(
        (
            p.amount + _late_fee(p) for p in payments
            if p.status == "paid" and p.payment_date is not None and p.payment_date <= as_of_date
        ),
        ZERO,
    )
    total_costs = sum((e.amount for e in expenses if e.expense_date <= as_of_date), ZERO)
    retained_earnings = total_income - total_costs
    owners_equity = ZERO

    return BalanceSheet(
        as_of_date=as_of_date,
        assets=Assets(current_assets=current_assets, total_assets=current_assets.total),
        liabilities=Liabilities(
            current_liabilities=current_liabilities,
            total_liabilities=current_liabilities.total,
        ),
        equity=Equity(
            owners_equity=owners_equity,
            retained_earnings=retained_earnings,
            total_equity=owners_equity + retained_earnings,
        ),
    )

def generate_cash_flow_statement(payments: Sequence[Payment], expenses: Sequence[Expense], start_date: date, end_date: date) -> CashFlowStatement:
    """
    Operating cash flow on a strict cash basis: only paid expenses leave cash,
    unlike the income statement which counts every expense in the period.
    """
    logger.info(f"Generating cash flow statement for {start_date} to {end_date}")
    income_statement = generate_income_statement(payments, expenses, start_date, end_date)

    operating_cash_in = sum(
        (p.amount + _late_fee(p) for p in _paid_payments_in_period(payments, start_date, end_date)),
        ZERO,
    )
    operating_cash_out = sum(
        (e.amount for e in _expenses_in_period(expenses, start_date, end_date) if e.status == "paid"),
        ZERO,
    )
    net_cash_from_operations = operating_cash_in - operating_cash_out

    return CashFlowStatement(
        period=ReportPeriod(start=start_date, end=end_date),
        operating_activities=OperatingActivities(
            net_income=income_statement.net_income,
            adjustments=WorkingCapitalAdjustments(accounts_receivable=ZERO, accounts_payable=ZERO),
            net_cash_from_operations=net_cash_from_operations,
        ),
        investing_activities=InvestingActivities(
            property_purchases=ZERO,
            equipment_purchases=ZERO,
            net_cash_from_investing=ZERO,
        ),
        financing_activities=FinancingActivities(
            loan_proceeds=ZERO,
            loan_repayments=ZERO,
            net_cash_from_financing=ZERO,
        ),
        net_cash_flow=net_cash_from_operations,
        beginning_cash=ZERO,
        ending_cash=net_cash_from_operations,
    )

def generate_property_performance(
    property_id: str,
    property_name: str,
    payments: Sequence[Payment],
    expenses: Sequence[Expense],
    units: Sequence[Unit],
    leases: Sequence[Lease],
    start_date: date,
    end_date: date,
) -> PropertyPerformance:
    logger.info(f"Generating performance for property {property_id} for {start_date} to {end_date}")

    property_units = [u for u in units if u.property_id == property_id]
    unit_ids = {u.id for u in property_units}
    property_leases = [l for l in leases if l.unit_id in unit_ids and l.status == "active"]
    lease_ids = {l.id for l in property_leases}

    property_payments = [
        p for p in _paid_payments_in_period(payments, start_date, end_date)
        if p.lease_id in lease_ids
    ]
    property_expenses = [
        e for e in _expenses_in_period(expenses, start_date, end_date)
        if e.property_id == property_id
    ]

    total_revenue = sum((p.amount + _late_fee(p) for p in property_payments), ZERO)
    total_expenses = sum((e.amount for e in property_expenses), ZERO)

    total_units = len(property_units)
    occupied_units = len([u for u in property_units if u.status == "occupied"])
    occupancy_rate = Decimal(occupied_units) / Decimal(total_units) * 100 if total_units > 0 else ZERO

    if property_leases:
        average_rent_per_unit = sum((l.rent_amount for l in property_leases), ZERO) / len(property_leases)
    else:
        average_rent_per_unit = ZERO

    return PropertyPerformance(
        property_id=property_id,
        property_name=property_name,
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        net_operating_income=total_revenue - total_expenses,
        occupancy_rate=occupancy_rate,
        average_rent_per_unit=average_rent_per_unit,
    )

def generate_transaction_summary(payments: Sequence[Payment], expenses: Sequence[Expense], start_date: date, end_date: date) -> TransactionSummary:
    """
    Totals per ledger account for the period.

    Revenue has at most two lines (rental income, late fees), omitted when
    zero. Expenses are grouped by the account their category maps to and
    listed largest first; equal amounts keep first-seen order.
    """
    logger.info(f"Generating transaction summary for {start_date} to {end_date}")
    period_payments = _paid_payments_in_period(payments, start_date, end_date)
    period_expenses = _expenses_in_period(expenses, start_date, end_date)

    revenue_lines = [
        TransactionSummaryLine(
            account_code=RENTAL_INCOME_ACCOUNT,
            account_name="Rental Income",
            amount=sum((p.amount for p in period_payments), ZERO),
            count=len(period_payments),
        ),
        TransactionSummaryLine(
            account_code=LATE_FEE_INCOME_ACCOUNT,
            account_name="Late Fee Income",
            amount=sum((_late_fee(p) for p in period_payments), ZERO),
            count=len([p for p in period_payments if _late_fee(p) > 0]),
        ),
    ]
    revenue_lines = [line for line in revenue_lines if line.amount > 0]

    # dicts keep insertion order, which gives the tie-break for the stable sort below
    expenses_by_account: Dict[str, Dict] = {}
    for expense in period_expenses:
        account_code = map_expense_category_to_account(expense.category)
        if account_code not in expenses_by_account:
            expenses_by_account[account_code] = {
                "account_code": account_code,
                "account_name": get_account_name(account_code),
                "amount": ZERO,
                "count": 0,
            }
        expenses_by_account[account_code]["amount"] += expense.amount
        expenses_by_account[account_code]["count"] += 1

    expense_lines = sorted(
        (TransactionSummaryLine(**row) for row in expenses_by_account.values()),
        key=lambda line: line.amount,
        reverse=True,
    )

    return TransactionSummary(revenue=revenue_lines, expenses=expense_lines)
