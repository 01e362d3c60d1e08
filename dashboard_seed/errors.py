"""Seed errors and the JSON error response used by the API.

Failures are reported as `{"error": "<message>"}` with HTTP 500.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DBAPIError

logger = logging.getLogger(__name__)


class SeedError(Exception):
    """Seeding aborted; the transaction was rolled back.

    `stage` names the step that failed: "connect", "fixtures", or the entity
    being seeded ("users", "customers", "invoices", "revenue").
    """

    def __init__(self, message: str, stage: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.stage = stage


def describe_error(exc: BaseException) -> str:
    # Prefer the driver's message over SQLAlchemy's wrapper (which appends SQL and a docs link)
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


def error_payload(message: str) -> dict:
    return {"error": message}


async def seed_error_handler(request: Request, exc: SeedError) -> JSONResponse:
    logger.error("Seed request failed at stage=%s: %s", exc.stage, exc.message)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=error_payload(exc.message))


__all__ = ["SeedError", "describe_error", "error_payload", "seed_error_handler"]
