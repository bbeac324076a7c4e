from pydantic import BaseModel
from typing import List
from datetime import date
from decimal import Decimal

class ReportPeriod(BaseModel):
    start: date
    end: date

class IncomeStatement(BaseModel):
    period: ReportPeriod
    revenue: 'Revenue'
    expenses: 'OperatingExpenses'
    net_income: Decimal
    profit_margin: Decimal

class Revenue(BaseModel):
    rental_income: Decimal
    late_fees: Decimal
    other_income: Decimal
    total_revenue: Decimal

class OperatingExpenses(BaseModel):
    maintenance: Decimal
    utilities: Decimal
    insurance: Decimal
    taxes: Decimal
    management: Decimal
    other: Decimal
    total_expenses: Decimal

class BalanceSheet(BaseModel):
    as_of_date: date
    assets: 'Assets'
    liabilities: 'Liabilities'
    equity: 'Equity'

class Assets(BaseModel):
    current_assets: 'CurrentAssets'
    total_assets: Decimal

class CurrentAssets(BaseModel):
    cash: Decimal
    accounts_receivable: Decimal
    security_deposits: Decimal
    total: Decimal

class Liabilities(BaseModel):
    current_liabilities: 'CurrentLiabilities'
    total_liabilities: Decimal

class CurrentLiabilities(BaseModel):
    accounts_payable: Decimal
    security_deposits_payable: Decimal
    prepaid_rent: Decimal
    total: Decimal

class Equity(BaseModel):
    owners_equity: Decimal
    retained_earnings: Decimal
    total_equity: Decimal

class CashFlowStatement(BaseModel):
    period: ReportPeriod
    operating_activities: 'OperatingActivities'
    investing_activities: 'InvestingActivities'
    financing_activities: 'FinancingActivities'
    net_cash_flow: Decimal
    beginning_cash: Decimal
    ending_cash: Decimal

class OperatingActivities(BaseModel):
    net_income: Decimal
    adjustments: 'WorkingCapitalAdjustments'
    net_cash_from_operations: Decimal

class WorkingCapitalAdjustments(BaseModel):
    accounts_receivable: Decimal
    accounts_payable: Decimal

class InvestingActivities(BaseModel):
    property_purchases: Decimal
    equipment_purchases: Decimal
    net_cash_from_investing: Decimal

class FinancingActivities(BaseModel):
    loan_proceeds: Decimal
    loan_repayments: Decimal
    net_cash_from_financing: Decimal

class PropertyPerformance(BaseModel):
    property_id: str
    property_name: str
    total_revenue: Decimal
    total_expenses: Decimal
    net_operating_income: Decimal
    occupancy_rate: Decimal
    average_rent_per_unit: Decimal

class TransactionSummaryLine(BaseModel):
    account_code: str
    account_name: str
    amount: Decimal
    count: int

class TransactionSummary(BaseModel):
    revenue: List[TransactionSummaryLine]
    expenses: List[TransactionSummaryLine]

class MonthRange(BaseModel):
    start: date
    end: date
    label: str

IncomeStatement.model_rebuild()
BalanceSheet.model_rebuild()
Assets.model_rebuild()
Liabilities.model_rebuild()
CashFlowStatement.model_rebuild()
OperatingActivities.model_rebuild()
