"""
Create a user (e.g. the first administrator). Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD ADDRESS [role]
Example:
  python -m app.scripts.create_user "System Administrator Account" admin@example.com 'Admin@1234' "1 Admin Street" system_administrator
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.models.user import ROLE_NORMAL_USER, ROLES
from app.services.errors import ServiceError
from app.services.users import create_user


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a store-rating user.")
    parser.add_argument("name", help="Full name (20-60 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="8-16 chars with an uppercase letter and a special character")
    parser.add_argument("address", help="Address (max 400 chars)")
    parser.add_argument("role", nargs="?", default=ROLE_NORMAL_USER, choices=list(ROLES))
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        user = create_user(
            db,
            name=args.name.strip(),
            email=args.email.strip(),
            password=args.password,
            address=args.address.strip(),
            role=args.role,
        )
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{args.email}' (id={user.id}) with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
