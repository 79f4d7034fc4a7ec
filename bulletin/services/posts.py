"""Post operations: create, public/own/pending listings, delete."""

import logging

from bulletin.core.enums import PostStatus
from bulletin.core.errors import ResourceNotFound
from bulletin.models import Post
from bulletin.repositories import CategoryRepository, PostRepository
from bulletin.schemas.auth import Identity
from bulletin.schemas.post import PostCreate
from bulletin.services.access import ensure_can_mutate
from bulletin.services.moderation import PUBLIC_STATUS

logger = logging.getLogger(__name__)

DELETE_FORBIDDEN_MESSAGE = "Forbidden: You do not have permission to delete this post."


def create_post(
    posts: PostRepository,
    categories: CategoryRepository,
    data: PostCreate,
    author: Identity,
) -> Post:
    """Store a new post owned by `author`. Status is always pending."""
    if categories.get(data.category_id) is None:
        raise ResourceNotFound("Category not found")
    post = Post(
        title=data.title,
        body=data.body,
        category_id=data.category_id,
        author_id=author.subject_id,
        status=PostStatus.PENDING.value,
    )
    created = posts.add(post)
    logger.info("Post created", extra={"post_id": created.id, "author_id": author.subject_id})
    return created


def list_public_posts(posts: PostRepository, category_id: int | None = None) -> list[Post]:
    """Approved posts only, newest first."""
    return posts.list_by_status(PUBLIC_STATUS, category_id=category_id)


def list_own_posts(posts: PostRepository, author: Identity) -> list[Post]:
    """All of the caller's posts regardless of status."""
    return posts.list_by_author(author.subject_id)


def list_pending_posts(posts: PostRepository) -> list[Post]:
    """Moderation queue, oldest first."""
    return posts.list_by_status(PostStatus.PENDING, oldest_first=True)


def delete_post(posts: PostRepository, post_id: int, requester: Identity) -> None:
    """Delete a post if the requester is its author or an admin."""
    post = posts.get(post_id)
    if post is None:
        raise ResourceNotFound("Post not found")
    ensure_can_mutate(requester, post.author_id, DELETE_FORBIDDEN_MESSAGE)
    if not posts.delete(post):
        raise ResourceNotFound("Post not found")
    logger.info("Post deleted", extra={"post_id": post_id, "requester_id": requester.subject_id})
