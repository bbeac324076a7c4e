from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from decimal import Decimal

class Expense(BaseModel):
    id: str
    property_id: str
    unit_id: Optional[str] = None
    category: str
    description: str = ""
    amount: Decimal = Field(..., ge=0)
    currency: str
    expense_date: date
    status: str  # pending, approved, paid, rejected, ...
    vendor_name: Optional[str] = None
    account_code: Optional[str] = None
    payment_method: Optional[str] = None
    reference_number: Optional[str] = None
    notes: Optional[str] = None
