"""
Replace non-admin data with sample users, stores and ratings. Run from project root:
  python -m app.scripts.seed [--password PASSWORD]

Administrators are kept; every other user, store and rating is deleted first.
"""

import argparse
import logging
import sys

from app.core.database import SessionLocal
from app.services.errors import ServiceError
from app.services.seed import DEFAULT_SAMPLE_PASSWORD, seed_database

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the database with sample data.")
    parser.add_argument(
        "--password",
        default=DEFAULT_SAMPLE_PASSWORD,
        help="Password given to every sample user",
    )
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        counts = seed_database(db, password=args.password)
        logger.info(
            "Seeding completed: users=%s stores=%s ratings=%s",
            counts["users"],
            counts["stores"],
            counts["ratings"],
        )
        return 0
    except ServiceError as e:
        db.rollback()
        logger.error("Seeding rejected: %s", e.message)
        return 1
    except Exception as e:
        db.rollback()
        logger.exception("Seeding failed: %s", e)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
