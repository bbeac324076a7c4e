from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from decimal import Decimal

class Payment(BaseModel):
    id: str
    lease_id: str
    amount: Decimal = Field(..., ge=0)
    currency: str
    payment_date: Optional[date] = None
    due_date: date
    status: str  # pending, paid, overdue, partial, cancelled
    late_fee: Optional[Decimal] = Field(None, ge=0)
    payment_type: Optional[str] = None
    account_code: Optional[str] = None
    renter_id: Optional[str] = None
    payment_method: Optional[str] = None
    reference_number: Optional[str] = None
    notes: Optional[str] = None
