"""JWT login and auth dependencies (get_current_identity, require_role, require_admin)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Header

from bulletin.api.deps import Tokens, Users
from bulletin.core.enums import UserRole
from bulletin.schemas.auth import Identity, LoginRequest, TokenResponse
from bulletin.services.access import ensure_role
from bulletin.services.auth import login as login_user

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, users: Users, tokens: Tokens) -> TokenResponse:
    """
    Authenticate with email and password; returns a JWT access token valid for one hour.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    return login_user(users, tokens, body.email, body.password)


def get_current_identity(
    tokens: Tokens,
    authorization: Annotated[str | None, Header()] = None,
) -> Identity:
    """
    Dependency: require a valid Bearer JWT and return the identity it asserts.

    Raises MissingCredential, MalformedCredential, InvalidCredential or
    ExpiredCredential (all 401). The role claim is taken from the token, not
    re-read from the database.
    """
    return tokens.validate(authorization)


CurrentIdentity = Annotated[Identity, Depends(get_current_identity)]


def require_role(role: UserRole):
    """Dependency factory: authenticated identity whose role is exactly `role` (else 403)."""

    def _require(identity: CurrentIdentity) -> Identity:
        return ensure_role(identity, role)

    return _require


require_admin = require_role(UserRole.ADMIN)

AdminIdentity = Annotated[Identity, Depends(require_admin)]
