"""
Change a user's role. Run from project root:
  python -m app.scripts.set_role EMAIL ROLE
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.models.user import ROLES
from app.services.errors import ServiceError
from app.services.users import set_role


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Change the role of an existing user.")
    parser.add_argument("email", help="Email of the user")
    parser.add_argument("role", choices=list(ROLES))
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        user = set_role(db, args.email.strip(), args.role)
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"User '{user.email}' now has role '{user.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
