"""Login: verify credentials against the stored hash and issue a token."""

import logging
from typing import Protocol

from bulletin.core.enums import UserRole
from bulletin.core.errors import AuthenticationFailed
from bulletin.core.security import TokenService, verify_password
from bulletin.models import User
from bulletin.schemas.auth import Identity, TokenResponse

logger = logging.getLogger(__name__)


class UserLookup(Protocol):
    def get_by_email(self, email: str) -> User | None: ...


def login(users: UserLookup, tokens: TokenService, email: str, password: str) -> TokenResponse:
    """
    Authenticate by email and password.

    Unknown email and wrong password fail identically so callers cannot probe
    which accounts exist.
    """
    user = users.get_by_email(email)
    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login failed", extra={"reason": "invalid_credentials"})
        raise AuthenticationFailed()
    identity = Identity(subject_id=user.id, email=user.email, role=UserRole(user.role))
    token = tokens.issue(identity)
    logger.info("Login succeeded", extra={"user_id": user.id})
    return TokenResponse(
        access_token=token,
        token_type="bearer",
        expires_in=tokens.lifetime_seconds,
    )
