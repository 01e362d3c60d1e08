"""Seed the dashboard database with placeholder data.

`seed_database` holds one pooled connection for the whole run and wraps every
step in a single transaction: tables are created if missing, and each fixture
row is inserted with ON CONFLICT DO NOTHING so re-running is a no-op for rows
already present. Any failure rolls the whole run back and raises `SeedError`.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from sqlalchemy import text
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateTable

from dashboard_seed import models
from dashboard_seed.auth import get_password_hash
from dashboard_seed.errors import SeedError, describe_error
from dashboard_seed.placeholder_data import load_fixtures
from dashboard_seed.schemas import FixtureSet, find_orphan_invoices

logger = logging.getLogger(__name__)

SEED_SUCCESS_MESSAGE = "Database seeded successfully"

_INSERT_BY_DIALECT = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def _ensure_uuid_extension(conn: Connection) -> None:
    if conn.dialect.name == "postgresql":
        conn.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))


def _create_table(conn: Connection, model: Any) -> None:
    conn.execute(CreateTable(model.__table__, if_not_exists=True))


def _insert_ignore(conn: Connection, model: Any, values: Dict[str, Any]) -> int:
    """Insert one row, skipping it when any unique key already exists.

    Returns the number of rows inserted (0 or 1).
    """
    insert = _INSERT_BY_DIALECT.get(conn.dialect.name)
    if insert is None:
        raise SeedError(f"Unsupported database dialect: {conn.dialect.name}")
    stmt = insert(model.__table__).values(**values).on_conflict_do_nothing()
    result = conn.execute(stmt)
    return max(result.rowcount, 0)


def seed_users(conn: Connection, fixtures: FixtureSet) -> int:
    _ensure_uuid_extension(conn)
    _create_table(conn, models.UserModel)

    inserted = 0
    for user in fixtures.users:
        hashed_password = get_password_hash(user.password)
        inserted += _insert_ignore(
            conn,
            models.UserModel,
            {"id": str(user.id), "name": user.name, "email": user.email, "password": hashed_password},
        )
    return inserted


def seed_customers(conn: Connection, fixtures: FixtureSet) -> int:
    _ensure_uuid_extension(conn)
    _create_table(conn, models.CustomerModel)

    inserted = 0
    for customer in fixtures.customers:
        inserted += _insert_ignore(
            conn,
            models.CustomerModel,
            {"id": str(customer.id), "name": customer.name, "email": customer.email, "image_url": customer.image_url},
        )
    return inserted


def seed_invoices(conn: Connection, fixtures: FixtureSet) -> int:
    _ensure_uuid_extension(conn)
    _create_table(conn, models.InvoiceModel)

    orphans = find_orphan_invoices(fixtures)
    if orphans:
        logger.warning(
            "%d invoice(s) reference customers missing from the fixtures: %s",
            len(orphans),
            sorted({str(inv.customer_id) for inv in orphans}),
        )

    inserted = 0
    for position, invoice in enumerate(fixtures.invoices):
        inserted += _insert_ignore(
            conn,
            models.InvoiceModel,
            {
                "id": str(invoice.key(position)),
                "customer_id": str(invoice.customer_id),
                "amount": invoice.amount,
                "status": invoice.status.value,
                "date": invoice.date,
            },
        )
    return inserted


def seed_revenue(conn: Connection, fixtures: FixtureSet) -> int:
    _create_table(conn, models.RevenueModel)

    inserted = 0
    for rev in fixtures.revenue:
        inserted += _insert_ignore(conn, models.RevenueModel, {"month": rev.month, "revenue": rev.revenue})
    return inserted


SEED_STEPS = (
    ("users", seed_users),
    ("customers", seed_customers),
    ("invoices", seed_invoices),
    ("revenue", seed_revenue),
)


def seed_database(engine: Engine, fixtures: Optional[FixtureSet] = None) -> dict:
    """Create the dashboard tables and insert the placeholder rows.

    All steps run in one transaction on one connection. Returns a dict with
    the success message and the number of rows inserted per table; rows that
    already existed are not counted. Raises `SeedError` after rolling back.
    """
    try:
        conn = engine.connect()
    except SQLAlchemyError as exc:
        logger.exception("Could not acquire a database connection for seeding")
        raise SeedError(describe_error(exc), stage="connect") from exc

    created = {name: 0 for name, _ in SEED_STEPS}
    stage = "fixtures"
    with conn:
        trans = conn.begin()
        try:
            if fixtures is None:
                fixtures = load_fixtures()

            for stage, step in SEED_STEPS:
                created[stage] = step(conn, fixtures)
                logger.info("Seeded %s: %d new row(s)", stage, created[stage])

            trans.commit()
        except Exception as exc:
            if trans.is_active:
                trans.rollback()
            logger.exception("Error seeding database (stage=%s), transaction rolled back", stage)
            if isinstance(exc, SeedError):
                exc.stage = exc.stage or stage
                raise
            raise SeedError(describe_error(exc), stage=stage) from exc

    logger.info("Database seeded: %s", created)
    return {"message": SEED_SUCCESS_MESSAGE, "data": created}


__all__ = [
    "SEED_SUCCESS_MESSAGE",
    "seed_database",
    "seed_users",
    "seed_customers",
    "seed_invoices",
    "seed_revenue",
]
