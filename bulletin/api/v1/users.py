"""User accounts: registration, public profiles, self-or-admin update and delete."""

from fastapi import APIRouter, Response, status

from bulletin.api.deps import Users
from bulletin.api.v1.auth import CurrentIdentity
from bulletin.core.config import get_settings
from bulletin.schemas.user import UserCreate, UserResponse, UserUpdate
from bulletin.services import users as user_service

router = APIRouter()


@router.get("", response_model=list[UserResponse])
def list_users(users: Users) -> list[UserResponse]:
    """List all users (no password data)."""
    return [UserResponse.model_validate(u) for u in users.list()]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, users: Users) -> UserResponse:
    return UserResponse.model_validate(user_service.get_user(users, user_id))


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(body: UserCreate, users: Users) -> UserResponse:
    """
    Create an account. Role may be participant or organizer; admins are
    created with `python -m bulletin.scripts.create_user`.
    """
    user = user_service.register_user(
        users, body, bcrypt_rounds=get_settings().BCRYPT_ROUNDS
    )
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    body: UserUpdate,
    users: Users,
    identity: CurrentIdentity,
) -> UserResponse:
    """Update a profile. Allowed for the account owner or an admin."""
    user = user_service.update_user(
        users, user_id, body, identity, bcrypt_rounds=get_settings().BCRYPT_ROUNDS
    )
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int, users: Users, identity: CurrentIdentity) -> Response:
    """Delete an account (owner or admin). The user's posts remain with no author."""
    user_service.delete_user(users, user_id, identity)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
