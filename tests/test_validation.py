"""Unit tests for app.services.validation: field rules and their boundaries."""

import unittest

from app.services.errors import FieldValidationError
from app.services.validation import (
    ADDRESS_MESSAGE,
    EMAIL_LENGTH_MESSAGE,
    EMAIL_MESSAGE,
    NAME_MESSAGE,
    PASSWORD_MESSAGE,
    RATING_MESSAGE,
    ROLE_MESSAGE,
    STORE_NAME_LENGTH_MESSAGE,
    STORE_NAME_MESSAGE,
    check_email,
    check_profile_fields,
    check_rating,
    check_store_fields,
    check_user_fields,
    is_valid_address,
    is_valid_email,
    is_valid_name,
    is_valid_password,
    is_valid_rating,
)

VALID_NAME = "Twenty Characters Ok"  # exactly 20


def _email_of_length(length: int) -> str:
    domain = "@example.com"
    return "a" * (length - len(domain)) + domain


class TestEmail(unittest.TestCase):
    def test_accepts_simple_address(self) -> None:
        self.assertTrue(is_valid_email("someone@example.com"))

    def test_rejects_missing_domain_dot(self) -> None:
        self.assertFalse(is_valid_email("someone@example"))

    def test_rejects_whitespace_and_empty(self) -> None:
        self.assertFalse(is_valid_email("some one@example.com"))
        self.assertFalse(is_valid_email(""))
        self.assertFalse(is_valid_email(None))

    def test_length_boundary(self) -> None:
        check_email(_email_of_length(255))
        with self.assertRaises(FieldValidationError) as ctx:
            check_email(_email_of_length(256))
        self.assertEqual(ctx.exception.message, EMAIL_LENGTH_MESSAGE)

    def test_format_checked_before_length(self) -> None:
        with self.assertRaises(FieldValidationError) as ctx:
            check_email("a" * 300)
        self.assertEqual(ctx.exception.message, EMAIL_MESSAGE)


class TestPassword(unittest.TestCase):
    """8-16 characters with an uppercase letter and a special character."""

    def test_length_boundaries(self) -> None:
        self.assertFalse(is_valid_password("Abcde!1"))  # 7
        self.assertTrue(is_valid_password("Abcdef!1"))  # 8
        self.assertTrue(is_valid_password("Abcdefghijklmn!1"))  # 16
        self.assertFalse(is_valid_password("Abcdefghijklmno!1"))  # 17

    def test_requires_uppercase(self) -> None:
        self.assertFalse(is_valid_password("abcdef!1"))

    def test_requires_special_character(self) -> None:
        self.assertFalse(is_valid_password("Abcdefg1"))

    def test_none_is_invalid(self) -> None:
        self.assertFalse(is_valid_password(None))


class TestNameAndAddress(unittest.TestCase):
    def test_name_boundaries(self) -> None:
        self.assertFalse(is_valid_name("x" * 19))
        self.assertTrue(is_valid_name("x" * 20))
        self.assertTrue(is_valid_name("x" * 60))
        self.assertFalse(is_valid_name("x" * 61))

    def test_address_boundaries(self) -> None:
        self.assertTrue(is_valid_address("x" * 400))
        self.assertFalse(is_valid_address("x" * 401))
        self.assertFalse(is_valid_address(""))


class TestRating(unittest.TestCase):
    def test_range(self) -> None:
        self.assertFalse(is_valid_rating(0))
        for score in range(1, 6):
            self.assertTrue(is_valid_rating(score))
        self.assertFalse(is_valid_rating(6))

    def test_none_and_bool_rejected(self) -> None:
        self.assertFalse(is_valid_rating(None))
        self.assertFalse(is_valid_rating(True))

    def test_check_rating_message(self) -> None:
        with self.assertRaises(FieldValidationError) as ctx:
            check_rating(9)
        self.assertEqual(ctx.exception.message, RATING_MESSAGE)
        self.assertEqual(ctx.exception.status_code, 400)


class TestCheckUserFields(unittest.TestCase):
    """check_user_fields reports the first failing field in order."""

    def _check(self, **overrides: object) -> str | None:
        fields = {
            "name": VALID_NAME,
            "email": "user@example.com",
            "password": "Secret@123",
            "address": "1 Road",
            "role": "normal_user",
        }
        fields.update(overrides)
        try:
            check_user_fields(**fields)
        except FieldValidationError as e:
            return e.message
        return None

    def test_valid_user_passes(self) -> None:
        self.assertIsNone(self._check())

    def test_each_field_message(self) -> None:
        self.assertEqual(self._check(name="short"), NAME_MESSAGE)
        self.assertEqual(self._check(email="bad"), EMAIL_MESSAGE)
        self.assertEqual(self._check(password="weak"), PASSWORD_MESSAGE)
        self.assertEqual(self._check(address="x" * 401), ADDRESS_MESSAGE)
        self.assertEqual(self._check(role="superuser"), ROLE_MESSAGE)

    def test_long_email_rejected(self) -> None:
        self.assertIsNone(self._check(email=_email_of_length(255)))
        self.assertEqual(self._check(email=_email_of_length(256)), EMAIL_LENGTH_MESSAGE)

    def test_name_checked_before_email(self) -> None:
        self.assertEqual(self._check(name="", email=""), NAME_MESSAGE)


class TestCheckStoreFields(unittest.TestCase):
    def test_store_name_min_length(self) -> None:
        with self.assertRaises(FieldValidationError) as ctx:
            check_store_fields("ab", "store@example.com", "1 Road")
        self.assertEqual(ctx.exception.message, STORE_NAME_MESSAGE)
        check_store_fields("abc", "store@example.com", "1 Road")

    def test_store_name_max_length(self) -> None:
        check_store_fields("x" * 255, "store@example.com", "1 Road")
        with self.assertRaises(FieldValidationError) as ctx:
            check_store_fields("x" * 256, "store@example.com", "1 Road")
        self.assertEqual(ctx.exception.message, STORE_NAME_LENGTH_MESSAGE)

    def test_store_email_max_length(self) -> None:
        check_store_fields("Corner Shop", _email_of_length(255), "1 Road")
        with self.assertRaises(FieldValidationError) as ctx:
            check_store_fields("Corner Shop", _email_of_length(256), "1 Road")
        self.assertEqual(ctx.exception.message, EMAIL_LENGTH_MESSAGE)


class TestCheckProfileFields(unittest.TestCase):
    def test_email_max_length(self) -> None:
        check_profile_fields(VALID_NAME, _email_of_length(255), "1 Road")
        with self.assertRaises(FieldValidationError) as ctx:
            check_profile_fields(VALID_NAME, _email_of_length(256), "1 Road")
        self.assertEqual(ctx.exception.message, EMAIL_LENGTH_MESSAGE)


if __name__ == "__main__":
    unittest.main()
