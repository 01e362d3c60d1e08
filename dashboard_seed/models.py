"""SQLAlchemy models for the dashboard seed tables.

Models implemented:
- UserModel
- CustomerModel
- InvoiceModel
- RevenueModel

Uses SQLAlchemy 2.0 typing (Mapped, mapped_column) and the declarative Base from
`dashboard_seed.database`. Ids are UUIDs generated by the database when an insert
does not supply one.
"""

from __future__ import annotations

import datetime
from enum import Enum as PyEnum

from sqlalchemy import Date, Integer, String, Text, Uuid
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql.expression import FunctionElement

from dashboard_seed.database import Base


class InvoiceStatus(str, PyEnum):
    PENDING = "pending"
    PAID = "paid"


class uuid_generate_v4(FunctionElement):
    """Server-side random UUID, provided by the `uuid-ossp` extension on PostgreSQL."""

    type = Uuid(as_uuid=False)
    inherit_cache = True


@compiles(uuid_generate_v4)
def _compile_uuid_generate_v4(element, compiler, **kw):
    return "uuid_generate_v4()"


@compiles(uuid_generate_v4, "sqlite")
def _compile_uuid_generate_v4_sqlite(element, compiler, **kw):
    # Non-native Uuid columns are stored as 32 lowercase hex characters
    return "(lower(hex(randomblob(16))))"


class UserModel(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(Uuid(as_uuid=False), primary_key=True, server_default=uuid_generate_v4())
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(Text, unique=True, nullable=False)
    password: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<User id={self.id} email={self.email}>"


class CustomerModel(Base):
    __tablename__ = "customers"

    id: Mapped[str] = mapped_column(Uuid(as_uuid=False), primary_key=True, server_default=uuid_generate_v4())
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<Customer id={self.id} name={self.name}>"


class InvoiceModel(Base):
    __tablename__ = "invoices"

    id: Mapped[str] = mapped_column(Uuid(as_uuid=False), primary_key=True, server_default=uuid_generate_v4())
    # Plain column, no ForeignKey: customers are not required to exist
    customer_id: Mapped[str] = mapped_column(Uuid(as_uuid=False), nullable=False)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    status: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<Invoice id={self.id} customer={self.customer_id} status={self.status}>"


class RevenueModel(Base):
    __tablename__ = "revenue"

    month: Mapped[str] = mapped_column(String(4), primary_key=True)
    revenue: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"<Revenue month={self.month} revenue={self.revenue}>"


# Creation order used by the seeder
SEED_MODELS = (UserModel, CustomerModel, InvoiceModel, RevenueModel)


__all__ = [
    "Base",
    "InvoiceStatus",
    "UserModel",
    "CustomerModel",
    "InvoiceModel",
    "RevenueModel",
    "SEED_MODELS",
    "uuid_generate_v4",
]
