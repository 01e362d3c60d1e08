"""System routes: seed data and health operations.

`/seed` creates the dashboard tables and fills them with placeholder data. It
is intended for development and demo environments and is safe to call
multiple times: rows that already exist are left untouched.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.engine import Engine

from dashboard_seed.database import get_engine
from dashboard_seed.seed import seed_database

router = APIRouter(tags=["System"])


@router.get("/seed")
def seed_data(engine: Engine = Depends(get_engine)) -> dict:
    """Seed placeholder data in one transaction (idempotent).

    Failures surface through the `SeedError` handler as HTTP 500.
    """
    result = seed_database(engine)
    return {"message": result["message"]}


@router.get("/api/health")
async def health() -> dict:
    return {"status": "ok"}
