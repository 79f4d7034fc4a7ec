"""Unit tests for bulletin.core.security: password hashing, token issue/validate, header parsing."""

import unittest
from datetime import UTC, datetime, timedelta

import jwt

from bulletin.core.enums import UserRole
from bulletin.core.errors import (
    ErrorKind,
    ExpiredCredential,
    InvalidCredential,
    MalformedCredential,
    MissingCredential,
)
from bulletin.core.security import (
    ACCESS_TOKEN_TTL,
    TokenService,
    hash_password,
    parse_bearer_header,
    verify_password,
)
from bulletin.schemas.auth import Identity

SECRET = "unit-test-secret-with-enough-bytes-for-hs256"
OTHER_SECRET = "another-secret-with-enough-bytes-for-hs256!"


def _identity(role: UserRole = UserRole.PARTICIPANT, subject_id: int = 7) -> Identity:
    return Identity(subject_id=subject_id, email="ada@example.com", role=role)


class TestPasswordHashing(unittest.TestCase):
    def test_verify_accepts_matching_password(self) -> None:
        hashed = hash_password("s3cret-pass", rounds=4)
        self.assertNotEqual(hashed, "s3cret-pass")
        self.assertTrue(verify_password("s3cret-pass", hashed))

    def test_verify_rejects_wrong_password(self) -> None:
        hashed = hash_password("s3cret-pass", rounds=4)
        self.assertFalse(verify_password("wrong-pass", hashed))

    def test_verify_returns_false_for_garbage_hash(self) -> None:
        self.assertFalse(verify_password("anything", "not-a-bcrypt-hash"))


class TestParseBearerHeader(unittest.TestCase):
    def test_missing_header(self) -> None:
        with self.assertRaises(MissingCredential):
            parse_bearer_header(None)
        with self.assertRaises(MissingCredential):
            parse_bearer_header("")

    def test_malformed_headers(self) -> None:
        for value in (
            "abc.def.ghi",
            "Basic dXNlcjpwYXNz",
            "Bearer",
            "Bearer ",
            "bearer abc",
            "Bearer  abc",
            "Bearer abc def",
        ):
            with self.subTest(value=value):
                with self.assertRaises(MalformedCredential):
                    parse_bearer_header(value)

    def test_extracts_token(self) -> None:
        self.assertEqual(parse_bearer_header("Bearer abc.def.ghi"), "abc.def.ghi")


class TestTokenService(unittest.TestCase):
    def setUp(self) -> None:
        self.tokens = TokenService(SECRET)

    def test_round_trip_returns_same_identity_for_every_role(self) -> None:
        for role in UserRole:
            with self.subTest(role=role):
                identity = _identity(role=role)
                token = self.tokens.issue(identity)
                self.assertEqual(self.tokens.validate(f"Bearer {token}"), identity)

    def test_token_expires_one_hour_after_issue(self) -> None:
        issued = datetime(2030, 1, 1, 12, 0, tzinfo=UTC)
        token = self.tokens.issue(_identity(), now=issued)
        claims = jwt.decode(
            token, SECRET, algorithms=["HS256"], options={"verify_exp": False, "verify_iat": False}
        )
        self.assertEqual(claims["exp"] - claims["iat"], int(ACCESS_TOKEN_TTL.total_seconds()))
        self.assertEqual(claims["subjectId"], 7)
        self.assertEqual(claims["email"], "ada@example.com")
        self.assertEqual(claims["role"], "participant")
        self.assertEqual(self.tokens.lifetime_seconds, 3600)

    def test_expired_token_rejected(self) -> None:
        token = self.tokens.issue(_identity(), now=datetime.now(UTC) - timedelta(hours=2))
        with self.assertRaises(ExpiredCredential) as ctx:
            self.tokens.validate(f"Bearer {token}")
        self.assertEqual(ctx.exception.kind, ErrorKind.EXPIRED_CREDENTIAL)
        self.assertEqual(ctx.exception.message, "Token has expired")

    def test_token_just_inside_window_accepted(self) -> None:
        token = self.tokens.issue(_identity(), now=datetime.now(UTC) - timedelta(minutes=59))
        self.assertEqual(self.tokens.validate(f"Bearer {token}").subject_id, 7)

    def test_foreign_signature_rejected(self) -> None:
        token = TokenService(OTHER_SECRET).issue(_identity())
        with self.assertRaises(InvalidCredential):
            self.tokens.validate(f"Bearer {token}")

    def test_signature_checked_before_expiry(self) -> None:
        token = TokenService(OTHER_SECRET).issue(
            _identity(), now=datetime.now(UTC) - timedelta(hours=3)
        )
        with self.assertRaises(InvalidCredential):
            self.tokens.validate(f"Bearer {token}")

    def test_tampered_payload_rejected(self) -> None:
        token = self.tokens.issue(_identity())
        header, payload, signature = token.split(".")
        forged = jwt.encode(
            {"subjectId": 1, "email": "x@example.com", "role": "admin",
             "iat": datetime.now(UTC), "exp": datetime.now(UTC) + timedelta(hours=1)},
            OTHER_SECRET,
            algorithm="HS256",
        ).split(".")[1]
        with self.assertRaises(InvalidCredential):
            self.tokens.validate(f"Bearer {header}.{forged}.{signature}")

    def test_garbage_token_rejected(self) -> None:
        with self.assertRaises(InvalidCredential):
            self.tokens.validate("Bearer not-a-jwt")

    def test_unknown_role_claim_rejected(self) -> None:
        now = datetime.now(UTC)
        token = jwt.encode(
            {"subjectId": 1, "email": "x@example.com", "role": "superuser",
             "iat": now, "exp": now + timedelta(hours=1)},
            SECRET,
            algorithm="HS256",
        )
        with self.assertRaises(InvalidCredential):
            self.tokens.validate(f"Bearer {token}")

    def test_missing_or_mistyped_claims_rejected(self) -> None:
        now = datetime.now(UTC)
        base = {"subjectId": 1, "email": "x@example.com", "role": "admin",
                "iat": now, "exp": now + timedelta(hours=1)}
        variants = {
            "no_subject": {k: v for k, v in base.items() if k != "subjectId"},
            "no_exp": {k: v for k, v in base.items() if k != "exp"},
            "string_subject": {**base, "subjectId": "1"},
            "bool_subject": {**base, "subjectId": True},
            "empty_email": {**base, "email": ""},
        }
        for name, payload in variants.items():
            with self.subTest(variant=name):
                token = jwt.encode(payload, SECRET, algorithm="HS256")
                with self.assertRaises(InvalidCredential):
                    self.tokens.validate(f"Bearer {token}")

    def test_empty_secret_refused(self) -> None:
        with self.assertRaises(ValueError):
            TokenService("")


if __name__ == "__main__":
    unittest.main()
