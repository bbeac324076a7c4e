from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from decimal import Decimal

class Invoice(BaseModel):
    id: str
    invoice_number: str
    invoice_date: date
    due_date: Optional[date] = None
    status: str  # draft, sent, paid, overdue, cancelled
    currency: str
    total_amount: Decimal = Field(..., ge=0)
    lease_id: Optional[str] = None
    property_id: Optional[str] = None
    unit_id: Optional[str] = None
