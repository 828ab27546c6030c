"""Test settings: in-memory SQLite and cheap bcrypt, set before the app is imported."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET"] = "test-secret-key-for-the-store-rating-suite"
os.environ["APP_ENV"] = "dev"
