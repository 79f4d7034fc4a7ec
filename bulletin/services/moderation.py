"""
Moderation state machine for posts.

    pending --approve--> approved
    pending --reject---> rejected

Approved and rejected are terminal: a post is moderated once. A second
decision on the same post is a conflict, and the write itself is conditional
on the status still being pending so two admins racing on one post cannot
both succeed.
"""

import logging
from typing import Protocol

from bulletin.core.enums import MODERATION_DECISIONS, PostStatus, UserRole
from bulletin.core.errors import ConflictError, InputValidationError, ResourceNotFound
from bulletin.models import Post
from bulletin.schemas.auth import Identity
from bulletin.services.access import ensure_role

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS: dict[PostStatus, frozenset[PostStatus]] = {
    PostStatus.PENDING: MODERATION_DECISIONS,
    PostStatus.APPROVED: frozenset(),
    PostStatus.REJECTED: frozenset(),
}

# The only status shown in the public listing.
PUBLIC_STATUS = PostStatus.APPROVED

ALREADY_MODERATED_MESSAGE = "Post has already been moderated"
INVALID_DECISION_MESSAGE = 'Invalid or missing status field. Must be "approved" or "rejected".'


class PostStore(Protocol):
    """What moderation needs from post storage."""

    def get(self, post_id: int) -> Post | None: ...

    def transition_status(
        self, post_id: int, expected: PostStatus, target: PostStatus
    ) -> bool: ...


def can_transition(current: PostStatus, target: PostStatus) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())


def moderate(
    store: PostStore,
    post_id: int,
    target: PostStatus,
    actor: Identity,
) -> Post:
    """
    Apply an admin's decision to a pending post and return the updated post.

    Raises InsufficientRole for non-admins, InputValidationError for a target
    other than approved/rejected, ResourceNotFound for an unknown post, and
    ConflictError when the post is no longer pending. Nothing is written
    unless every check passes.
    """
    ensure_role(actor, UserRole.ADMIN)
    if target not in MODERATION_DECISIONS:
        raise InputValidationError(INVALID_DECISION_MESSAGE)

    post = store.get(post_id)
    if post is None:
        raise ResourceNotFound("Post not found")

    current = PostStatus(post.status)
    if not can_transition(current, target):
        logger.info(
            "Moderation refused: post already decided",
            extra={"post_id": post_id, "current": current.value, "target": target.value},
        )
        raise ConflictError(ALREADY_MODERATED_MESSAGE)

    if not store.transition_status(post_id, current, target):
        logger.info(
            "Moderation lost a race: status changed concurrently",
            extra={"post_id": post_id, "target": target.value},
        )
        raise ConflictError(ALREADY_MODERATED_MESSAGE)

    logger.info(
        "Post moderated",
        extra={
            "post_id": post_id,
            "from_status": current.value,
            "to_status": target.value,
            "moderator_id": actor.subject_id,
        },
    )
    updated = store.get(post_id)
    if updated is None:
        raise ResourceNotFound("Post not found")
    return updated
