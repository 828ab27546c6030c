"""Field rules for users, stores and ratings."""

import re

from app.models.rating import RATING_MAX, RATING_MIN
from app.models.user import ROLES
from app.services.errors import FieldValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PASSWORD_SPECIAL_PATTERN = re.compile(r'[!@#$%^&*(),.?":{}|<>]')
PASSWORD_UPPER_PATTERN = re.compile(r"[A-Z]")

NAME_MIN_LEN = 20
NAME_MAX_LEN = 60
ADDRESS_MAX_LEN = 400
STORE_NAME_MIN_LEN = 3
STORE_NAME_MAX_LEN = 255
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 16

NAME_MESSAGE = f"Name must be {NAME_MIN_LEN}-{NAME_MAX_LEN} characters"
EMAIL_MESSAGE = "Invalid email format"
EMAIL_LENGTH_MESSAGE = f"Email must be at most {EMAIL_MAX_LEN} characters"
PASSWORD_MESSAGE = (
    f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters "
    "with uppercase and special character"
)
ADDRESS_MESSAGE = f"Address is required and must be at most {ADDRESS_MAX_LEN} characters"
ROLE_MESSAGE = "Invalid role. Must be normal_user, store_owner, or system_administrator"
STORE_NAME_MESSAGE = f"Store name must be at least {STORE_NAME_MIN_LEN} characters"
STORE_NAME_LENGTH_MESSAGE = f"Store name must be at most {STORE_NAME_MAX_LEN} characters"
RATING_MESSAGE = f"Rating must be {RATING_MIN}-{RATING_MAX}"


def is_valid_email(email: str | None) -> bool:
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def is_valid_password(password: str | None) -> bool:
    """8-16 characters, at least one uppercase letter and one special character."""
    if not password:
        return False
    if not (PASSWORD_MIN_LEN <= len(password) <= PASSWORD_MAX_LEN):
        return False
    if not PASSWORD_UPPER_PATTERN.search(password):
        return False
    return PASSWORD_SPECIAL_PATTERN.search(password) is not None


def is_valid_name(name: str | None) -> bool:
    return bool(name) and NAME_MIN_LEN <= len(name) <= NAME_MAX_LEN


def is_valid_address(address: str | None) -> bool:
    return bool(address) and len(address) <= ADDRESS_MAX_LEN


def is_valid_store_name(name: str | None) -> bool:
    return bool(name) and len(name) >= STORE_NAME_MIN_LEN


def is_valid_rating(rating: int | None) -> bool:
    # bool is an int subclass; True/False are not scores.
    if rating is None or isinstance(rating, bool):
        return False
    return RATING_MIN <= rating <= RATING_MAX


def is_valid_role(role: str | None) -> bool:
    return role in ROLES


def check_password(password: str | None) -> None:
    if not is_valid_password(password):
        raise FieldValidationError(PASSWORD_MESSAGE)


def check_email(email: str | None) -> None:
    if not is_valid_email(email):
        raise FieldValidationError(EMAIL_MESSAGE)
    if len(email) > EMAIL_MAX_LEN:
        raise FieldValidationError(EMAIL_LENGTH_MESSAGE)


def check_profile_fields(name: str | None, email: str | None, address: str | None) -> None:
    """Raise FieldValidationError for the first invalid profile field."""
    if not is_valid_name(name):
        raise FieldValidationError(NAME_MESSAGE)
    check_email(email)
    if not is_valid_address(address):
        raise FieldValidationError(ADDRESS_MESSAGE)


def check_user_fields(
    name: str | None,
    email: str | None,
    password: str | None,
    address: str | None,
    role: str | None,
) -> None:
    """
    Validate a new user in field order: name, email, password, address, role.

    Raises FieldValidationError with the message for the first failing field.
    """
    if not is_valid_name(name):
        raise FieldValidationError(NAME_MESSAGE)
    check_email(email)
    check_password(password)
    if not is_valid_address(address):
        raise FieldValidationError(ADDRESS_MESSAGE)
    if not is_valid_role(role):
        raise FieldValidationError(ROLE_MESSAGE)


def check_store_fields(name: str | None, email: str | None, address: str | None) -> None:
    if not is_valid_store_name(name):
        raise FieldValidationError(STORE_NAME_MESSAGE)
    if len(name) > STORE_NAME_MAX_LEN:
        raise FieldValidationError(STORE_NAME_LENGTH_MESSAGE)
    check_email(email)
    if not is_valid_address(address):
        raise FieldValidationError(ADDRESS_MESSAGE)


def check_rating(rating: int | None) -> None:
    if not is_valid_rating(rating):
        raise FieldValidationError(RATING_MESSAGE)
