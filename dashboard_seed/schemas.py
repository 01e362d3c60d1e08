"""Pydantic schemas for the seed fixtures.

Each fixture record is validated before it is inserted so that malformed
placeholder data fails inside the seeding transaction instead of producing
half-typed rows.
"""

from __future__ import annotations

import uuid
import datetime
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from dashboard_seed.models import InvoiceStatus

# Fixed namespace for deriving invoice ids from their position and content
INVOICE_NAMESPACE = uuid.UUID("6f1c2a58-3d0e-4c8b-9a57-2f4e1b7d9c30")


class UserFixture(BaseModel):
    id: uuid.UUID
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


class CustomerFixture(BaseModel):
    id: uuid.UUID
    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=255)
    image_url: str = Field(..., max_length=255)


class InvoiceFixture(BaseModel):
    id: Optional[uuid.UUID] = None
    customer_id: uuid.UUID
    amount: int = Field(..., ge=0, description="Amount in cents")
    status: InvoiceStatus
    date: datetime.date

    def key(self, position: int) -> uuid.UUID:
        """Stable id: the explicit one, or a UUIDv5 of the invoice's position and content.

        The position keeps identical fixtures apart while re-runs reproduce the same ids.
        """
        if self.id is not None:
            return self.id
        name = f"{position}:{self.customer_id}:{self.amount}:{self.status.value}:{self.date.isoformat()}"
        return uuid.uuid5(INVOICE_NAMESPACE, name)


class RevenueFixture(BaseModel):
    month: str = Field(..., min_length=1, max_length=4)
    revenue: int

    @field_validator("month")
    @classmethod
    def strip_month(cls, value: str) -> str:
        return value.strip()


class FixtureSet(BaseModel):
    users: List[UserFixture] = Field(default_factory=list)
    customers: List[CustomerFixture] = Field(default_factory=list)
    invoices: List[InvoiceFixture] = Field(default_factory=list)
    revenue: List[RevenueFixture] = Field(default_factory=list)


def find_orphan_invoices(fixtures: FixtureSet) -> List[InvoiceFixture]:
    """Return invoices whose customer is not part of the same fixture set."""
    customer_ids = {c.id for c in fixtures.customers}
    return [inv for inv in fixtures.invoices if inv.customer_id not in customer_ids]


__all__ = [
    "UserFixture",
    "CustomerFixture",
    "InvoiceFixture",
    "RevenueFixture",
    "FixtureSet",
    "find_orphan_invoices",
    "INVOICE_NAMESPACE",
]
