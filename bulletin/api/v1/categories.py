"""Categories: public reads, admin-only writes."""

from fastapi import APIRouter, Response, status

from bulletin.api.deps import Categories
from bulletin.api.v1.auth import AdminIdentity
from bulletin.schemas.category import CategoryCreate, CategoryResponse, CategoryUpdate
from bulletin.services import categories as category_service

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
def list_categories(categories: Categories) -> list[CategoryResponse]:
    return [CategoryResponse.model_validate(c) for c in categories.list()]


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(category_id: int, categories: Categories) -> CategoryResponse:
    return CategoryResponse.model_validate(
        category_service.get_category(categories, category_id)
    )


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryCreate,
    categories: Categories,
    _admin: AdminIdentity,
) -> CategoryResponse:
    """Create a category (admin only). Duplicate names return 409."""
    return CategoryResponse.model_validate(category_service.create_category(categories, body))


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: int,
    body: CategoryUpdate,
    categories: Categories,
    _admin: AdminIdentity,
) -> CategoryResponse:
    return CategoryResponse.model_validate(
        category_service.update_category(categories, category_id, body)
    )


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    categories: Categories,
    _admin: AdminIdentity,
) -> Response:
    """Delete a category (admin only). Refused with 409 while posts still use it."""
    category_service.delete_category(categories, category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
