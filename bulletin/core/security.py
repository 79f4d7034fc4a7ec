"""Password hashing and JWT issuance/validation for authentication."""

import logging
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from bulletin.core.config import Settings
from bulletin.core.enums import UserRole
from bulletin.core.errors import (
    ExpiredCredential,
    InvalidCredential,
    MalformedCredential,
    MissingCredential,
)
from bulletin.schemas.auth import Identity

logger = logging.getLogger(__name__)

# Every token lives exactly one hour from issuance; there is no refresh.
ACCESS_TOKEN_TTL = timedelta(hours=1)

BEARER_SCHEME = "Bearer"

REQUIRED_CLAIMS = ("subjectId", "email", "role", "exp", "iat")


def hash_password(plain_password: str, rounds: int = 12) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def parse_bearer_header(header_value: str | None) -> str:
    """
    Extract the token from an Authorization header value.

    Raises MissingCredential when the header is absent or empty, and
    MalformedCredential unless the value is exactly "Bearer <token>".
    """
    if not header_value:
        raise MissingCredential()
    parts = header_value.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME or not parts[1]:
        raise MalformedCredential()
    return parts[1]


class TokenService:
    """Issues and validates signed, time-boxed access tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(settings.JWT_SECRET.get_secret_value(), settings.JWT_ALGORITHM)

    @property
    def lifetime_seconds(self) -> int:
        return int(ACCESS_TOKEN_TTL.total_seconds())

    def issue(self, identity: Identity, now: datetime | None = None) -> str:
        """Create a JWT asserting the identity, expiring one hour after `now`."""
        issued_at = now or datetime.now(UTC)
        payload: dict[str, Any] = {
            "subjectId": identity.subject_id,
            "email": identity.email,
            "role": identity.role.value,
            "iat": issued_at,
            "exp": issued_at + ACCESS_TOKEN_TTL,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> Identity:
        """
        Verify signature then expiry, and rebuild the Identity from the claims.

        The claims are trusted as-is; the store is not consulted.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": list(REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredCredential() from e
        except jwt.PyJWTError as e:
            raise InvalidCredential() from e
        return _identity_from_claims(payload)

    def validate(self, header_value: str | None) -> Identity:
        """Full gate: parse the Authorization header and decode its token."""
        return self.decode(parse_bearer_header(header_value))


def _identity_from_claims(payload: dict[str, Any]) -> Identity:
    subject_id = payload.get("subjectId")
    email = payload.get("email")
    # bool is an int subclass; reject it explicitly.
    if not isinstance(subject_id, int) or isinstance(subject_id, bool):
        raise InvalidCredential()
    if not isinstance(email, str) or not email:
        raise InvalidCredential()
    try:
        role = UserRole(payload.get("role"))
    except ValueError as e:
        raise InvalidCredential() from e
    return Identity(subject_id=subject_id, email=email, role=role)
