"""Role and moderation status enums shared by models, schemas and policies."""

from enum import Enum


class UserRole(str, Enum):
    """Coarse capability label carried in tokens; compared by exact match."""

    PARTICIPANT = "participant"
    ORGANIZER = "organizer"
    ADMIN = "admin"


class PostStatus(str, Enum):
    """Moderation status of a post. New posts start as PENDING."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


# Roles a visitor may pick when registering; admins are created with the CLI script.
SELF_ASSIGNABLE_ROLES = frozenset({UserRole.PARTICIPANT, UserRole.ORGANIZER})

# Statuses an admin may move a pending post to.
MODERATION_DECISIONS = frozenset({PostStatus.APPROVED, PostStatus.REJECTED})
