"""ORM model for user-submitted posts and their moderation status."""

from sqlalchemy import CheckConstraint, Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship

from bulletin.core.enums import PostStatus
from bulletin.models.base import Base


class Post(Base):
    """
    A post awaiting or past moderation.

    author_id is set to NULL when the author's account is deleted; the post
    itself survives. Categories cannot be deleted while posts reference them.
    """

    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint("status IN ('pending', 'approved', 'rejected')", name="status"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    body = Column(Text, nullable=False)
    status = Column(
        String(16),
        nullable=False,
        default=PostStatus.PENDING.value,
        index=True,
    )
    author_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    category_id = Column(
        Integer,
        ForeignKey("categories.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    author = relationship("User")
    category = relationship("Category")
