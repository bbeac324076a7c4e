from pydantic import BaseModel, model_validator
from typing import List
from datetime import date
from schemas.payments import Payment
from schemas.expenses import Expense
from schemas.leases import Lease
from schemas.units import Unit

class PeriodReportRequest(BaseModel):
    payments: List[Payment] = []
    expenses: List[Expense] = []
    start_date: date
    end_date: date

    @model_validator(mode='after')
    def check_period(self):
        if self.start_date > self.end_date:
            raise ValueError('start_date cannot be after end_date')
        return self

class BalanceSheetRequest(BaseModel):
    payments: List[Payment] = []
    expenses: List[Expense] = []
    leases: List[Lease] = []
    as_of_date: date

class PropertyPerformanceRequest(PeriodReportRequest):
    property_id: str
    property_name: str
    units: List[Unit] = []
    leases: List[Lease] = []
