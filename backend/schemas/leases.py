from pydantic import BaseModel, Field
from typing import Optional
from datetime import date
from decimal import Decimal

class Lease(BaseModel):
    id: str
    property_id: str
    unit_id: str
    renter_id: Optional[str] = None
    start_date: date
    end_date: date
    rent_amount: Decimal = Field(..., ge=0)
    deposit_amount: Decimal = Field(Decimal(0), ge=0)
    status: str  # draft, active, expired, terminated, renewed
    currency: Optional[str] = None
