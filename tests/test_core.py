"""Unit tests for app.core: settings validation and token/password helpers."""

import unittest

import jwt
from pydantic import ValidationError
from sqlalchemy.engine import make_url

from app.core.config import Settings
from app.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


class TestSettings(unittest.TestCase):
    def test_rejects_non_postgres_url(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(DATABASE_URL="mysql://u:p@localhost/db")

    def test_strips_database_url(self) -> None:
        s = Settings(DATABASE_URL="  postgresql://u:p@localhost/civic  ")
        self.assertEqual(s.DATABASE_URL, "postgresql://u:p@localhost/civic")

    def test_default_url_names_psycopg2_driver(self) -> None:
        default = Settings.model_fields["DATABASE_URL"].default
        self.assertEqual(make_url(default).get_driver_name(), "psycopg2")

    def test_recent_limit_bounds(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(RECENT_COMPLAINTS_LIMIT=0)
        self.assertEqual(Settings().RECENT_COMPLAINTS_LIMIT, 5)

    def test_blank_jwt_secret_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(JWT_SECRET="   ")


class TestSecurity(unittest.TestCase):
    def test_token_carries_sub_and_role(self) -> None:
        payload = decode_access_token(create_access_token(sub=12, role="citizen"))
        self.assertEqual(payload["sub"], "12")
        self.assertEqual(payload["role"], "citizen")

    def test_tampered_token_rejected(self) -> None:
        token = create_access_token(sub=1, role="admin")
        with self.assertRaises(jwt.PyJWTError):
            decode_access_token(token[:-2] + ("AA" if token[-2:] != "AA" else "BB"))

    def test_password_hash_roundtrip(self) -> None:
        hashed = hash_password("s3cret-pass")
        self.assertTrue(verify_password("s3cret-pass", hashed))
        self.assertFalse(verify_password("other-pass", hashed))
        self.assertFalse(verify_password("s3cret-pass", "not-a-bcrypt-hash"))


if __name__ == "__main__":
    unittest.main()
