from pydantic import BaseModel
from typing import Optional

class Unit(BaseModel):
    id: str
    property_id: str
    status: str  # available, occupied, maintenance, reserved
    unit_number: Optional[str] = None
