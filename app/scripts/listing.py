"""
Print users, stores or ratings as plain rows. Run from project root:
  python -m app.scripts.listing users [--role ROLE]
  python -m app.scripts.listing stores [--name NAME]
  python -m app.scripts.listing ratings [--store-id ID]
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.models.user import ROLES
from app.services.ratings import list_all_ratings
from app.services.stores import list_stores_for_admin
from app.services.users import list_users


def _print_users(db, args):
    users = list_users(db, role=args.role)
    print(f"Total users: {len(users)}")
    for i, user in enumerate(users, 1):
        line = f"{i}. {user.name} <{user.email}> role={user.role} id={user.id}"
        if user.store_rating is not None:
            line += f" store_rating={user.store_rating:.2f} ({user.rating_count} ratings)"
        print(line)


def _print_stores(db, args):
    stores = list_stores_for_admin(db, name=args.name)
    print(f"Total stores: {len(stores)}")
    for i, store in enumerate(stores, 1):
        print(
            f"{i}. {store.name} <{store.email}> id={store.id} owner_id={store.owner_id} "
            f"rating={store.avg_rating:.2f} ({store.rating_count} ratings)"
        )


def _print_ratings(db, args):
    ratings = list_all_ratings(db, store_id=args.store_id)
    print(f"Total ratings: {len(ratings)}")
    for i, r in enumerate(ratings, 1):
        print(
            f"{i}. {r.rating}/5 store='{r.store_name}' by {r.user_name} <{r.user_email}> "
            f"comment={r.comment or 'None'}"
        )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List users, stores or ratings.")
    sub = parser.add_subparsers(dest="kind", required=True)

    users = sub.add_parser("users", help="Users, newest first")
    users.add_argument("--role", choices=list(ROLES))
    users.set_defaults(handler=_print_users)

    stores = sub.add_parser("stores", help="Stores with average rating")
    stores.add_argument("--name", help="Case-insensitive substring of the store name")
    stores.set_defaults(handler=_print_stores)

    ratings = sub.add_parser("ratings", help="Ratings with user and store names")
    ratings.add_argument("--store-id", type=int)
    ratings.set_defaults(handler=_print_ratings)

    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        args.handler(db, args)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
