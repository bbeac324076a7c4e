"""
Property Ledger - Test Configuration

Builders for source records shared by the accounting tests.
"""

import os
import tempfile
from datetime import date
from decimal import Decimal

import pytest

# Keep the application's log files out of the working tree
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="property-ledger-logs-"))

from schemas.payments import Payment
from schemas.expenses import Expense
from schemas.leases import Lease
from schemas.units import Unit
from schemas.invoices import Invoice


TENANT_ID = "tenant-1"
USER_ID = "user-1"


def make_payment(**overrides) -> Payment:
    data = {
        "id": "pay-1",
        "lease_id": "lease-1",
        "amount": Decimal("1000"),
        "currency": "SCR",
        "payment_date": date(2024, 3, 5),
        "due_date": date(2024, 3, 1),
        "status": "paid",
        "late_fee": Decimal("0"),
    }
    data.update(overrides)
    return Payment(**data)


def make_expense(**overrides) -> Expense:
    data = {
        "id": "exp-1",
        "property_id": "prop-1",
        "category": "repairs",
        "description": "Fix leaking tap",
        "amount": Decimal("200"),
        "currency": "SCR",
        "expense_date": date(2024, 3, 10),
        "status": "paid",
    }
    data.update(overrides)
    return Expense(**data)


def make_lease(**overrides) -> Lease:
    data = {
        "id": "lease-1",
        "property_id": "prop-1",
        "unit_id": "unit-1",
        "start_date": date(2024, 1, 1),
        "end_date": date(2024, 12, 31),
        "rent_amount": Decimal("1000"),
        "deposit_amount": Decimal("2000"),
        "status": "active",
    }
    data.update(overrides)
    return Lease(**data)


def make_unit(**overrides) -> Unit:
    data = {
        "id": "unit-1",
        "property_id": "prop-1",
        "status": "occupied",
    }
    data.update(overrides)
    return Unit(**data)


def make_invoice(**overrides) -> Invoice:
    data = {
        "id": "inv-1",
        "invoice_number": "INV-0001",
        "invoice_date": date(2024, 3, 1),
        "status": "sent",
        "currency": "SCR",
        "total_amount": Decimal("1000"),
        "property_id": "prop-1",
        "unit_id": "unit-1",
    }
    data.update(overrides)
    return Invoice(**data)


@pytest.fixture
def march():
    """The March 2024 reporting window."""
    return date(2024, 3, 1), date(2024, 3, 31)
