"""Posts: public listing of approved posts, author actions, and the admin moderation queue."""

from typing import Annotated

from fastapi import APIRouter, Query, Response, status

from bulletin.api.deps import Categories, Posts
from bulletin.api.v1.auth import AdminIdentity, CurrentIdentity
from bulletin.schemas.post import ModerationRequest, PostCreate, PostResponse
from bulletin.services import posts as post_service
from bulletin.services.moderation import moderate

router = APIRouter()


@router.get("", response_model=list[PostResponse])
def list_public_posts(
    posts: Posts,
    category: Annotated[int | None, Query(description="Filter posts by category ID")] = None,
) -> list[PostResponse]:
    """Approved posts only, newest first. Pending and rejected posts are never listed here."""
    return [
        PostResponse.model_validate(p)
        for p in post_service.list_public_posts(posts, category_id=category)
    ]


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    body: PostCreate,
    posts: Posts,
    categories: Categories,
    identity: CurrentIdentity,
) -> PostResponse:
    """Create a post owned by the caller. It stays pending until an admin approves it."""
    return PostResponse.model_validate(
        post_service.create_post(posts, categories, body, identity)
    )


@router.get("/my-posts", response_model=list[PostResponse])
def list_my_posts(posts: Posts, identity: CurrentIdentity) -> list[PostResponse]:
    """The caller's posts in every status."""
    return [PostResponse.model_validate(p) for p in post_service.list_own_posts(posts, identity)]


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_post(post_id: int, posts: Posts, identity: CurrentIdentity) -> Response:
    """Delete a post. Allowed for its author or an admin."""
    post_service.delete_post(posts, post_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/admin/pending", response_model=list[PostResponse])
def list_pending_posts(posts: Posts, _admin: AdminIdentity) -> list[PostResponse]:
    """Moderation queue (admin only), oldest first."""
    return [PostResponse.model_validate(p) for p in post_service.list_pending_posts(posts)]


@router.patch("/admin/{post_id}/moderate", response_model=PostResponse)
def moderate_post(
    post_id: int,
    body: ModerationRequest,
    posts: Posts,
    admin: AdminIdentity,
) -> PostResponse:
    """
    Approve or reject a pending post (admin only).

    A post is moderated once: a second decision returns 409 and leaves the
    first one in place.
    """
    return PostResponse.model_validate(moderate(posts, post_id, body.status, admin))
