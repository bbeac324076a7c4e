from fastapi import APIRouter, HTTPException, status
from typing import List, Optional
from schemas.chart_of_accounts import Account, AccountMapping
from accounting import chart_of_accounts as coa

router = APIRouter(
    prefix="/chart-of-accounts",
    tags=["Chart of Accounts"],
)

@router.get("/", response_model=List[Account])
def get_accounts(account_type: Optional[str] = None, sub_type: Optional[str] = None):
    if account_type:
        accounts = coa.get_accounts_by_type(account_type)
    else:
        accounts = [account for account in coa.DEFAULT_CHART_OF_ACCOUNTS if account.is_active]

    if sub_type:
        accounts = [account for account in accounts if account.sub_type == sub_type]

    return accounts

@router.get("/mappings/expense-category/{category}", response_model=AccountMapping)
def map_expense_category(category: str):
    account_code = coa.map_expense_category_to_account(category)
    return AccountMapping(source=category, account_code=account_code, account_name=coa.get_account_name(account_code))

@router.get("/mappings/payment-type/{payment_type}", response_model=AccountMapping)
def map_payment_type(payment_type: str):
    account_code = coa.map_payment_to_account(payment_type)
    return AccountMapping(source=payment_type, account_code=account_code, account_name=coa.get_account_name(account_code))

@router.get("/{account_code}", response_model=Account)
def get_account(account_code: str):
    account = coa.get_account_by_code(account_code)
    if not account:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Account with code {account_code} not found"
        )
    return account
