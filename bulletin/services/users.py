"""
User account operations.

Passwords are hashed here, before a create or update reaches the store. The
ORM entity never hashes anything itself.
"""

import logging

from bulletin.core.enums import SELF_ASSIGNABLE_ROLES, UserRole
from bulletin.core.errors import InsufficientRole, ResourceNotFound
from bulletin.core.security import hash_password
from bulletin.models import User
from bulletin.repositories import UserRepository
from bulletin.schemas.auth import Identity
from bulletin.schemas.user import UserCreate, UserUpdate
from bulletin.services.access import ensure_can_mutate

logger = logging.getLogger(__name__)


def get_user(users: UserRepository, user_id: int) -> User:
    user = users.get(user_id)
    if user is None:
        raise ResourceNotFound("User not found")
    return user


def register_user(
    users: UserRepository,
    data: UserCreate,
    bcrypt_rounds: int = 12,
    allow_admin: bool = False,
) -> User:
    """
    Create an account. Self-registration may only pick participant or
    organizer; `allow_admin` is for the seeding CLI.
    """
    if not allow_admin and data.role not in SELF_ASSIGNABLE_ROLES:
        raise InsufficientRole()
    user = User(
        first_name=data.first_name,
        last_name=data.last_name,
        email=data.email,
        password_hash=hash_password(data.password, rounds=bcrypt_rounds),
        role=data.role.value,
    )
    created = users.add(user)
    logger.info("User registered", extra={"user_id": created.id, "role": created.role})
    return created


def update_user(
    users: UserRepository,
    user_id: int,
    data: UserUpdate,
    requester: Identity,
    bcrypt_rounds: int = 12,
) -> User:
    """Update a profile. Self or admin; only an admin may change a role."""
    user = get_user(users, user_id)
    ensure_can_mutate(requester, user.id)
    if data.role is not None and data.role.value != user.role and requester.role != UserRole.ADMIN:
        raise InsufficientRole()

    if data.first_name is not None:
        user.first_name = data.first_name
    if data.last_name is not None:
        user.last_name = data.last_name
    if data.email is not None:
        user.email = data.email
    if data.password is not None:
        user.password_hash = hash_password(data.password, rounds=bcrypt_rounds)
    if data.role is not None:
        user.role = data.role.value
    return users.save(user)


def delete_user(users: UserRepository, user_id: int, requester: Identity) -> None:
    """Delete an account (self or admin). The user's posts remain, orphaned."""
    user = get_user(users, user_id)
    ensure_can_mutate(requester, user.id)
    users.delete(user)
    logger.info("User deleted", extra={"user_id": user_id, "requester_id": requester.subject_id})
