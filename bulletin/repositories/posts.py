"""Post persistence, including the conditional status update used by moderation."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Query, Session, joinedload

from bulletin.core.enums import PostStatus
from bulletin.core.errors import ResourceNotFound
from bulletin.models import Post

logger = logging.getLogger(__name__)

# Author or category row vanished between the token/lookup and the insert.
MISSING_REFERENCE_MESSAGE = "Post author or category no longer exists"


class PostRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def _query(self) -> Query:
        return self.session.query(Post).options(
            joinedload(Post.author),
            joinedload(Post.category),
        )

    def get(self, post_id: int) -> Post | None:
        return self._query().filter(Post.id == post_id).first()

    def add(self, post: Post) -> Post:
        refs = {"author_id": post.author_id, "category_id": post.category_id}
        self.session.add(post)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("Post insert rejected by constraint", extra=refs)
            raise ResourceNotFound(MISSING_REFERENCE_MESSAGE) from e
        return self.get(post.id)

    def delete(self, post: Post) -> bool:
        deleted = (
            self.session.query(Post)
            .filter(Post.id == post.id)
            .delete(synchronize_session=False)
        )
        self.session.commit()
        return deleted > 0

    def list_by_status(
        self,
        status: PostStatus,
        category_id: int | None = None,
        oldest_first: bool = False,
    ) -> list[Post]:
        q = self._query().filter(Post.status == status.value)
        if category_id is not None:
            q = q.filter(Post.category_id == category_id)
        if oldest_first:
            q = q.order_by(Post.created_at.asc(), Post.id.asc())
        else:
            q = q.order_by(Post.created_at.desc(), Post.id.desc())
        return q.all()

    def list_by_author(self, author_id: int) -> list[Post]:
        return (
            self._query()
            .filter(Post.author_id == author_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
            .all()
        )

    def transition_status(
        self,
        post_id: int,
        expected: PostStatus,
        target: PostStatus,
    ) -> bool:
        """
        Set status to `target` only if it is still `expected`.

        Returns False when no row matched, i.e. another writer changed the
        status first.
        """
        updated = (
            self.session.query(Post)
            .filter(Post.id == post_id, Post.status == expected.value)
            .update(
                {Post.status: target.value, Post.updated_at: func.now()},
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated == 1
