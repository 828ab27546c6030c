"""
Reset a user's password without the current one. Run from project root:
  python -m app.scripts.reset_password EMAIL NEW_PASSWORD
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.services.errors import ServiceError
from app.services.users import reset_password


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Reset the password of an existing user.")
    parser.add_argument("email", help="Email of the user")
    parser.add_argument("password", help="8-16 chars with an uppercase letter and a special character")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        reset_password(db, args.email.strip(), args.password)
    except ServiceError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Password reset for '{args.email}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
