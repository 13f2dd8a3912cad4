from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession
from uuid import UUID
from typing import List, Optional

from shop_admin.db.main import get_session
from shop_admin.auth.dependencies import admin_role_checker, get_optional_current_user
from shop_admin.db.models import User
from shop_admin.roles.repository import RoleRepository
from .repository import UserRepository
from .schemas import UserCreate, UserUpdate, UserResponse
from .service import UserService

user_router = APIRouter()
admin_only = [Depends(admin_role_checker)]


def get_user_service(session: AsyncSession = Depends(get_session)) -> UserService:
    return UserService(UserRepository(session), RoleRepository(session))


@user_router.get(
    "/",
    response_model=List[UserResponse],
    dependencies=admin_only,
    summary="Get all users",
)
async def get_all_users(user_service: UserService = Depends(get_user_service)):
    return await user_service.get_all_users()


@user_router.get(
    "/{user_uid}",
    response_model=UserResponse,
    dependencies=admin_only,
    summary="Get user details by UID",
    responses={
        404: {"description": "User not found."},
    }
)
async def get_user_by_uid(user_uid: UUID, user_service: UserService = Depends(get_user_service)):
    return await user_service.get_user_by_id(user_uid)


@user_router.post(
    "/",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        400: {"description": "Validation error or empty role list."},
        403: {"description": "Only an administrator may assign privileged roles."},
        404: {"description": "A role name does not exist."},
        409: {"description": "Email already registered."},
    }
)
async def create_user(
    user_data: UserCreate,
    user_service: UserService = Depends(get_user_service),
    current_user: Optional[User] = Depends(get_optional_current_user)
):
    """
    Create a new user account.

    - **name**: Display name
    - **email**: Unique email address
    - **password**: Plain password, stored only as a bcrypt hash
    - **roles**: Names of existing roles (at least one). Without an admin
      token only `customer` may be requested
    """
    is_admin = current_user is not None and "admin" in current_user.role_names
    return await user_service.create_user(user_data, assigned_by_admin=is_admin)


@user_router.put(
    "/{user_uid}",
    response_model=UserResponse,
    dependencies=admin_only,
    summary="Update user information",
    responses={
        404: {"description": "User or role not found."},
        409: {"description": "Email already registered."},
    }
)
async def update_user(user_uid: UUID, user_data: UserUpdate, user_service: UserService = Depends(get_user_service)):
    """
    Update user information. All fields are optional; roles are replaced
    only when a list is supplied.
    """
    return await user_service.update_user(user_uid, user_data)


@user_router.delete(
    "/{user_uid}",
    dependencies=admin_only,
    summary="Delete user",
    responses={
        404: {"description": "User not found."},
    }
)
async def delete_user(user_uid: UUID, user_service: UserService = Depends(get_user_service)):
    await user_service.delete_user(user_uid)
    return {"message": "User deleted successfully"}
