"""Category operations. Writes are admin-only (enforced at the route)."""

import logging

from bulletin.core.errors import ResourceNotFound
from bulletin.models import Category
from bulletin.repositories import CategoryRepository
from bulletin.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger(__name__)


def get_category(categories: CategoryRepository, category_id: int) -> Category:
    category = categories.get(category_id)
    if category is None:
        raise ResourceNotFound("Category not found")
    return category


def create_category(categories: CategoryRepository, data: CategoryCreate) -> Category:
    """Insert directly; a duplicate name surfaces as ConflictError from the store."""
    category = categories.add(Category(name=data.name, description=data.description))
    logger.info("Category created", extra={"category_id": category.id})
    return category


def update_category(
    categories: CategoryRepository,
    category_id: int,
    data: CategoryUpdate,
) -> Category:
    category = get_category(categories, category_id)
    if data.name is not None:
        category.name = data.name
    if "description" in data.model_fields_set:
        category.description = data.description
    return categories.save(category)


def delete_category(categories: CategoryRepository, category_id: int) -> None:
    category = get_category(categories, category_id)
    categories.delete(category)
    logger.info("Category deleted", extra={"category_id": category_id})
