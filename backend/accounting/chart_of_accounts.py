from typing import Dict, List, Optional
from schemas.chart_of_accounts import Account

CASH_ACCOUNT = "1000"
ACCOUNTS_RECEIVABLE_ACCOUNT = "1100"
SECURITY_DEPOSITS_HELD_ACCOUNT = "1200"
ACCOUNTS_PAYABLE_ACCOUNT = "2000"
SECURITY_DEPOSITS_PAYABLE_ACCOUNT = "2100"
RENTAL_INCOME_ACCOUNT = "4000"
LATE_FEE_INCOME_ACCOUNT = "4100"
MISCELLANEOUS_EXPENSE_ACCOUNT = "6900"

_DEFAULT_ACCOUNTS = [
    # Assets
    {"code": "1000", "name": "Cash and Cash Equivalents", "account_type": "asset", "sub_type": "current_asset",
     "description": "Bank accounts and cash on hand"},
    {"code": "1100", "name": "Accounts Receivable", "account_type": "asset", "sub_type": "current_asset",
     "description": "Outstanding rent and other amounts owed by tenants"},
    {"code": "1200", "name": "Security Deposits Held", "account_type": "asset", "sub_type": "current_asset",
     "description": "Tenant security deposits held in trust"},
    {"code": "1500", "name": "Property and Buildings", "account_type": "asset", "sub_type": "fixed_asset",
     "description": "Real estate and property investments"},
    {"code": "1600", "name": "Equipment and Fixtures", "account_type": "asset", "sub_type": "fixed_asset",
     "description": "Property furniture, appliances, and equipment"},
    # Liabilities
    {"code": "2000", "name": "Accounts Payable", "account_type": "liability", "sub_type": "current_liability",
     "description": "Outstanding bills and vendor payments"},
    {"code": "2100", "name": "Security Deposits Payable", "account_type": "liability", "sub_type": "current_liability",
     "description": "Tenant security deposits obligation"},
    {"code": "2200", "name": "Prepaid Rent", "account_type": "liability", "sub_type": "current_liability",
     "description": "Rent received in advance"},
    {"code": "2500", "name": "Mortgage Payable", "account_type": "liability", "sub_type": "long_term_liability",
     "description": "Property mortgage loans"},
    # Equity
    {"code": "3000", "name": "Owner's Equity", "account_type": "equity", "sub_type": "owner_equity",
     "description": "Owner's investment in the business"},
    {"code": "3100", "name": "Retained Earnings", "account_type": "equity", "sub_type": "owner_equity",
     "description": "Accumulated profits"},
    # Revenue
    {"code": "4000", "name": "Rental Income", "account_type": "revenue", "sub_type": "operating_revenue",
     "description": "Monthly rent payments from tenants"},
    {"code": "4100", "name": "Late Fee Income", "account_type": "revenue", "sub_type": "operating_revenue",
     "description": "Late payment fees"},
    {"code": "4200", "name": "Parking Income", "account_type": "revenue", "sub_type": "operating_revenue",
     "description": "Parking spot rental fees"},
    {"code": "4300", "name": "Application Fees", "account_type": "revenue", "sub_type": "operating_revenue",
     "description": "Tenant application processing fees"},
    {"code": "4900", "name": "Other Income", "account_type": "revenue", "sub_type": "other_revenue",
     "description": "Miscellaneous income"},
    # Expenses
    {"code": "5000", "name": "Maintenance and Repairs", "account_type": "expense", "sub_type": "operating_expense",
     "description": "Property maintenance and repair costs"},
    {"code": "5100", "name": "Utilities", "account_type": "expense", "sub_type": "operating_expense",
     "description": "Water, electricity, gas, internet"},
    {"code": "5200", "name": "Property Insurance", "account_type": "expense", "sub_type": "operating_expense",
     "description": "Property and liability insurance"},
    {"code": "5300", "name": "Property Taxes", "account_type": "expense", "sub_type": "operating_expense",
     "description": "Municipal property taxes"},
    {"code": "5400", "name": "Property Management Fees", "account_type": "expense", "sub_type": "operating_expense",
     "description": "Property management services"},
    {"code": "5500", "name": "Cleaning and Janitorial", "account_type": "expense", "sub_type": "operating_expense",
     "description": "Cleaning services and supplies"},
    {"code": "5600", "name": "Landscaping and Grounds", "account_type": "expense", "sub_type": "operating_expense",
     "description": "Lawn care and landscaping"},
    {"code": "5700", "name": "Advertising and Marketing", "account_type": "expense", "sub_type": "operating_expense",
     "description": "Property listing and advertising costs"},
    {"code": "5800", "name": "Legal and Professional Fees", "account_type": "expense", "sub_type": "operating_expense",
     "description": "Attorney and accountant fees"},
    {"code": "5900", "name": "Office and Administrative", "account_type": "expense", "sub_type": "operating_expense",
     "description": "Office supplies and administrative costs"},
    {"code": "6000", "name": "Mortgage Interest", "account_type": "expense", "sub_type": "other_expense",
     "description": "Interest paid on property loans"},
    {"code": "6100", "name": "Depreciation", "account_type": "expense", "sub_type": "other_expense",
     "description": "Asset depreciation expense"},
    {"code": "6900", "name": "Miscellaneous Expenses", "account_type": "expense", "sub_type": "other_expense",
     "description": "Other expenses"},
]

# Declaration order is significant: type/sub-type listings preserve it.
DEFAULT_CHART_OF_ACCOUNTS = tuple(Account(**account_data) for account_data in _DEFAULT_ACCOUNTS)

EXPENSE_CATEGORY_ACCOUNTS: Dict[str, str] = {
    "maintenance": "5000",
    "repairs": "5000",
    "utilities": "5100",
    "insurance": "5200",
    "taxes": "5300",
    "cleaning": "5500",
    "supplies": "5900",
    "tenant_reimbursement": ACCOUNTS_RECEIVABLE_ACCOUNT,
    "other": MISCELLANEOUS_EXPENSE_ACCOUNT,
}

PAYMENT_TYPE_ACCOUNTS: Dict[str, str] = {
    "rent": RENTAL_INCOME_ACCOUNT,
    "late_fee": LATE_FEE_INCOME_ACCOUNT,
    "parking": "4200",
    "application": "4300",
    "other": "4900",
}

def get_account_by_code(code: str) -> Optional[Account]:
    """Exact code lookup. Returns None for an unregistered code."""
    for account in DEFAULT_CHART_OF_ACCOUNTS:
        if account.code == code:
            return account
    return None

def get_accounts_by_type(account_type: str) -> List[Account]:
    return [
        account for account in DEFAULT_CHART_OF_ACCOUNTS
        if account.account_type == account_type and account.is_active
    ]

def get_accounts_by_sub_type(sub_type: str) -> List[Account]:
    return [
        account for account in DEFAULT_CHART_OF_ACCOUNTS
        if account.sub_type == sub_type and account.is_active
    ]

def get_account_name(code: str, default: str = "") -> str:
    account = get_account_by_code(code)
    return account.name if account else default

def map_expense_category_to_account(category: str) -> str:
    """
    Resolve an expense category to its account code.
    Unknown categories are bucketed into Miscellaneous Expenses (6900).
    """
    return EXPENSE_CATEGORY_ACCOUNTS.get(category, MISCELLANEOUS_EXPENSE_ACCOUNT)

def map_payment_to_account(payment_type: str) -> str:
    """
    Resolve a payment type to its revenue account code.
    Unknown payment types fall back to Rental Income (4000).
    """
    return PAYMENT_TYPE_ACCOUNTS.get(payment_type, RENTAL_INCOME_ACCOUNT)
