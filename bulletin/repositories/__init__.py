"""SQLAlchemy-backed stores, one per aggregate, constructed per request."""

from bulletin.repositories.categories import CategoryRepository
from bulletin.repositories.posts import PostRepository
from bulletin.repositories.users import UserRepository

__all__ = ["CategoryRepository", "PostRepository", "UserRepository"]
