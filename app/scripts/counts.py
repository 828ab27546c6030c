"""
Print total users, stores and ratings. Run from project root:
  python -m app.scripts.counts
"""
import sys

from app.core.database import SessionLocal
from app.services.dashboard import get_counts


def main() -> int:
    db = SessionLocal()
    try:
        stats = get_counts(db)
    finally:
        db.close()
    print(f"users={stats.users} stores={stats.stores} ratings={stats.ratings}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
