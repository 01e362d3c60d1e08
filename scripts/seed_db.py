"""seed_db.py

Create the dashboard tables and insert the placeholder data without going
through the HTTP route. Uses the same transaction and conflict-skip rules as
`GET /seed`, so running it repeatedly is safe.

Usage:
  python scripts/seed_db.py                                   # uses DATABASE_URL
  python scripts/seed_db.py --database-url sqlite:///./dashboard.db
"""

import argparse
import logging
import os
import sys

from dashboard_seed.database import DATABASE_URL, build_engine
from dashboard_seed.errors import SeedError
from dashboard_seed.seed import seed_database

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"), format="[%(levelname)s] %(message)s")
logger = logging.getLogger("seed_db")


def run(database_url: str) -> int:
    engine = build_engine(database_url)
    try:
        result = seed_database(engine)
    except SeedError as exc:
        logger.error("Seeding failed at stage=%s: %s", exc.stage, exc.message)
        return 1
    finally:
        engine.dispose()

    logger.info(result["message"])
    for table, count in result["data"].items():
        print(f"{table}: {count} inserted")
    return 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Seed the dashboard database with placeholder data")
    parser.add_argument("--database-url", default=DATABASE_URL, help="SQLAlchemy URL (defaults to DATABASE_URL)")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    return run(args.database_url)


if __name__ == "__main__":
    sys.exit(main())
