"""SQLAlchemy ORM models."""

from bulletin.models.base import Base
from bulletin.models.category import Category
from bulletin.models.post import Post
from bulletin.models.user import User

__all__ = ["Base", "Category", "Post", "User"]
