from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import date, datetime
from decimal import Decimal
from schemas.payments import Payment
from schemas.leases import Lease
from schemas.chart_of_accounts import VALID_ACCOUNT_TYPES

VALID_TRANSACTION_TYPES = ["payment", "expense", "invoice", "deposit", "adjustment"]
VALID_REFERENCE_TYPES = ["payment", "expense", "invoice", "lease", "maintenance"]
VALID_ENTRY_TYPES = ["debit", "credit"]

class JournalEntry(BaseModel):
    """A single posting: one side of a balanced transaction."""
    id: str
    tenant_id: str
    transaction_date: date
    transaction_type: str
    reference_id: Optional[str] = None
    reference_type: Optional[str] = None
    description: str
    account_code: str
    entry_type: str  # debit, credit
    amount: Decimal = Field(..., ge=0)
    currency: str
    property_id: Optional[str] = None
    unit_id: Optional[str] = None
    notes: Optional[str] = None
    created_by: str
    created_at: datetime

    @field_validator('transaction_type')
    @classmethod
    def validate_transaction_type(cls, v):
        if v not in VALID_TRANSACTION_TYPES:
            raise ValueError(f"transaction_type must be one of {VALID_TRANSACTION_TYPES}")
        return v

    @field_validator('reference_type')
    @classmethod
    def validate_reference_type(cls, v):
        if v is not None and v not in VALID_REFERENCE_TYPES:
            raise ValueError(f"reference_type must be one of {VALID_REFERENCE_TYPES}")
        return v

    @field_validator('entry_type')
    @classmethod
    def validate_entry_type(cls, v):
        if v not in VALID_ENTRY_TYPES:
            raise ValueError(f"entry_type must be one of {VALID_ENTRY_TYPES}")
        return v

class AccountBalanceRequest(BaseModel):
    entries: List[JournalEntry]
    account_code: str
    account_type: Optional[str] = None

    @field_validator('account_type')
    @classmethod
    def validate_account_type(cls, v):
        if v is not None and v not in VALID_ACCOUNT_TYPES:
            raise ValueError(f"account_type must be one of {VALID_ACCOUNT_TYPES}")
        return v

class AccountBalance(BaseModel):
    account_code: str
    account_name: Optional[str] = None
    balance: Decimal

class PaymentPostingRequest(BaseModel):
    payment: Payment
    lease: Lease
