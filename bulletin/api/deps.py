"""FastAPI dependencies that construct per-request stores and the token service."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from bulletin.core.config import get_settings
from bulletin.core.database import get_db
from bulletin.core.security import TokenService
from bulletin.repositories import CategoryRepository, PostRepository, UserRepository


@lru_cache
def get_token_service() -> TokenService:
    """Token service bound to the configured signing secret (built once)."""
    return TokenService.from_settings(get_settings())


def get_user_repository(db: Annotated[Session, Depends(get_db)]) -> UserRepository:
    return UserRepository(db)


def get_category_repository(db: Annotated[Session, Depends(get_db)]) -> CategoryRepository:
    return CategoryRepository(db)


def get_post_repository(db: Annotated[Session, Depends(get_db)]) -> PostRepository:
    return PostRepository(db)


Tokens = Annotated[TokenService, Depends(get_token_service)]
Users = Annotated[UserRepository, Depends(get_user_repository)]
Categories = Annotated[CategoryRepository, Depends(get_category_repository)]
Posts = Annotated[PostRepository, Depends(get_post_repository)]
