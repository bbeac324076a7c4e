from fastapi import APIRouter, Depends
from typing import List
from schemas.expenses import Expense
from schemas.invoices import Invoice
from schemas.leases import Lease
from schemas.journal_entry import JournalEntry, AccountBalance, AccountBalanceRequest, PaymentPostingRequest
from accounting import journal_entries as journal_entries_service
from accounting.chart_of_accounts import get_account_name
from utils.tenancy import get_tenant_id, get_user_identifier

router = APIRouter(
    prefix="/journal-entries",
    tags=["Journal Entries"],
)

# Postings are returned to the caller for persistence; nothing is stored here.

@router.post("/payment", response_model=List[JournalEntry])
def create_payment_entries(
    request: PaymentPostingRequest,
    tenant_id: str = Depends(get_tenant_id),
    created_by: str = Depends(get_user_identifier)
):
    return journal_entries_service.create_payment_journal_entries(
        payment=request.payment,
        lease=request.lease,
        tenant_id=tenant_id,
        created_by=created_by
    )

@router.post("/expense", response_model=List[JournalEntry])
def create_expense_entries(
    expense: Expense,
    tenant_id: str = Depends(get_tenant_id),
    created_by: str = Depends(get_user_identifier)
):
    return journal_entries_service.create_expense_journal_entries(expense, tenant_id=tenant_id, created_by=created_by)

@router.post("/invoice", response_model=List[JournalEntry])
def create_invoice_entries(
    invoice: Invoice,
    tenant_id: str = Depends(get_tenant_id),
    created_by: str = Depends(get_user_identifier)
):
    return journal_entries_service.create_invoice_journal_entries(invoice, tenant_id=tenant_id, created_by=created_by)

@router.post("/deposit", response_model=List[JournalEntry])
def create_deposit_entries(
    lease: Lease,
    tenant_id: str = Depends(get_tenant_id),
    created_by: str = Depends(get_user_identifier)
):
    return journal_entries_service.create_deposit_journal_entries(lease, tenant_id=tenant_id, created_by=created_by)

@router.post("/balance", response_model=AccountBalance)
def get_account_balance(request: AccountBalanceRequest):
    """
    Balance of one account over the supplied postings, using the normal-balance
    side of its account type.
    """
    balance = journal_entries_service.calculate_account_balance(
        request.entries,
        request.account_code,
        request.account_type
    )
    return AccountBalance(
        account_code=request.account_code,
        account_name=get_account_name(request.account_code) or None,
        balance=balance
    )
