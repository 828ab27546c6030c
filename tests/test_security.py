"""Unit tests for app.core.security: bcrypt hashing and JWT round trips."""

import unittest

import jwt

from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestPasswordHashing(unittest.TestCase):
    def test_hash_is_not_plaintext_and_verifies(self) -> None:
        hashed = hash_password("Secret@123")
        self.assertNotEqual(hashed, "Secret@123")
        self.assertTrue(verify_password("Secret@123", hashed))
        self.assertFalse(verify_password("Secret@124", hashed))

    def test_malformed_hash_is_false(self) -> None:
        self.assertFalse(verify_password("Secret@123", "not-a-bcrypt-hash"))


class TestAccessToken(unittest.TestCase):
    def test_round_trip(self) -> None:
        payload = decode_access_token(create_access_token(sub=42, role="store_owner"))
        self.assertEqual(payload["sub"], "42")
        self.assertEqual(payload["role"], "store_owner")
        self.assertGreater(payload["exp"], payload["iat"])

    def test_tampered_token_rejected(self) -> None:
        token = create_access_token(sub=1, role="normal_user")
        forged = jwt.encode({"sub": "1", "role": "system_administrator"}, "a-different-secret-key-of-decent-length", algorithm="HS256")
        self.assertNotEqual(token, forged)
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(forged)


if __name__ == "__main__":
    unittest.main()
