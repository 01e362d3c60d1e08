"""FastAPI application and app configuration for the dashboard seed service.

This module creates the FastAPI `app`, configures middleware (CORS, rate limiting),
registers the system router and probes the database on startup (calls
`dashboard_seed.database.check_connection`).
"""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import List

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from dashboard_seed.database import check_connection
from dashboard_seed.errors import SeedError, error_payload, seed_error_handler
from dashboard_seed.routers import system

logger = logging.getLogger(__name__)
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))


DEFAULT_RATE_LIMIT = os.getenv("RATE_LIMIT", "10/minute")
limiter = Limiter(key_func=get_remote_address, default_limits=[DEFAULT_RATE_LIMIT])


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Reachability is only reported; /seed surfaces connection errors itself
    check_connection()
    yield


def parse_origins(value: str) -> List[str]:
    """Comma separated CORS origins; "*" allows any origin."""
    return [o.strip() for o in value.split(",") if o.strip()]


app = FastAPI(title="Dashboard Seed Service", version="1.0.0", lifespan=lifespan)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=parse_origins(os.getenv("CORS_ORIGINS", "*")),
    allow_methods=["GET"],
)


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse(status_code=429, content=error_payload("Rate limit exceeded"))


app.add_exception_handler(SeedError, seed_error_handler)
app.include_router(system.router)


__all__ = ["app", "limiter", "parse_origins"]
