"""
Category persistence.

Name uniqueness relies on the table's unique constraint: the insert or update
is attempted directly and a constraint violation becomes ConflictError. Two
concurrent creates with the same name cannot both commit.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from bulletin.core.errors import ConflictError
from bulletin.models import Category

logger = logging.getLogger(__name__)


class CategoryRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, category_id: int) -> Category | None:
        return self.session.get(Category, category_id)

    def list(self) -> list[Category]:
        return self.session.query(Category).order_by(Category.id).all()

    def add(self, category: Category) -> Category:
        self.session.add(category)
        self._commit("A category with this name already exists")
        self.session.refresh(category)
        return category

    def save(self, category: Category) -> Category:
        self._commit("Another category with this name already exists")
        self.session.refresh(category)
        return category

    def delete(self, category: Category) -> None:
        self.session.delete(category)
        self._commit("Category is still used by posts and cannot be deleted")

    def _commit(self, conflict_message: str) -> None:
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            logger.info("Category write rejected by constraint", extra={"reason": conflict_message})
            raise ConflictError(conflict_message) from e
