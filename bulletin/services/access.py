"""Role and ownership checks: pure functions over an Identity."""

from bulletin.core.enums import UserRole
from bulletin.core.errors import InsufficientRole, OwnershipViolation
from bulletin.schemas.auth import Identity


def authorize(identity: Identity, required_role: UserRole) -> bool:
    """True iff the identity holds exactly the required role (no hierarchy)."""
    return identity.role == required_role


def ensure_role(identity: Identity, required_role: UserRole) -> Identity:
    """Raise InsufficientRole unless authorize() accepts; returns the identity."""
    if not authorize(identity, required_role):
        raise InsufficientRole()
    return identity


def can_mutate(identity: Identity, owner_id: int | None) -> bool:
    """
    True iff the identity is an admin or owns the resource.

    An orphaned resource (owner_id is None) can only be changed by an admin.
    """
    if identity.role == UserRole.ADMIN:
        return True
    return owner_id is not None and identity.subject_id == owner_id


def ensure_can_mutate(
    identity: Identity,
    owner_id: int | None,
    message: str | None = None,
) -> None:
    """Raise OwnershipViolation unless can_mutate() accepts."""
    if not can_mutate(identity, owner_id):
        raise OwnershipViolation(message)
