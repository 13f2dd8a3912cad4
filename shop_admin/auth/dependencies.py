# Authentication and Authorization Dependencies

from fastapi import Request, Depends
from fastapi.security import HTTPBearer
from sqlmodel.ext.asyncio.session import AsyncSession
from typing import List, Any, Optional
import logging
import uuid

from shop_admin.db.redis import token_in_blocklist
from shop_admin.db.main import get_session
from shop_admin.db.models import User
from shop_admin.users.repository import UserRepository

from .utils import decode_token
from shop_admin.errors import (
    InvalidToken,
    AccessTokenRequired,
    InsufficientPermission,
)

logger = logging.getLogger(__name__)


class TokenBearer(HTTPBearer):
    """Base class for JWT token validation.
    Extends FastAPI's HTTPBearer to add custom token validation logic.
    """
    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> dict:
        """Validate the Bearer token from the Authorization header.

        Args:
            request (Request): The incoming HTTP request

        Returns:
            dict: Decoded token data if valid

        Raises:
            AccessTokenRequired: If no bearer token was sent
            InvalidToken: If token is invalid, expired or blacklisted
        """
        creds = await super().__call__(request)
        if creds is None:
            raise AccessTokenRequired()

        token_data = decode_token(creds.credentials)

        # Check if token has been blacklisted (e.g., after logout)
        if await token_in_blocklist(token_data.get('jti')):
            logger.warning(f"Revoked token presented: {token_data.get('jti')}")
            raise InvalidToken("You provided a revoked token")

        self.verify_token_data(token_data)

        return token_data

    def verify_token_data(self, token_data: dict) -> None:
        """Token-specific validation logic, implemented by child classes."""
        raise NotImplementedError("Please Override this method in child classes")


class AccessTokenBearer(TokenBearer):
    def verify_token_data(self, token_data: dict) -> None:
        user = token_data.get("user")
        if not isinstance(user, dict) or "id" not in user:
            raise InvalidToken()


async def get_current_user(
    token_details: dict = Depends(AccessTokenBearer()),
    session: AsyncSession = Depends(get_session)
) -> User:
    try:
        user_uid = uuid.UUID(token_details['user']['id'])
    except ValueError:
        raise InvalidToken()

    user = await UserRepository(session).get_by_id(user_uid)
    if user is None:
        # the account was deleted after the token was issued
        raise InvalidToken()

    return user


async def get_optional_current_user(
    request: Request,
    session: AsyncSession = Depends(get_session)
) -> Optional[User]:
    """The authenticated user, or None for an anonymous request.

    A token that is sent but invalid is still rejected.
    """
    if not request.headers.get("Authorization"):
        return None

    token_details = await AccessTokenBearer()(request)
    return await get_current_user(token_details, session)


class RoleChecker:
    """Role-Based Access Control (RBAC) implementation.
    Used as a dependency to protect routes based on user roles.
    """
    def __init__(self, allowed_roles: List[str]) -> None:
        self.allowed_roles = allowed_roles

    async def __call__(self, current_user: User = Depends(get_current_user)) -> Any:
        if any(name in self.allowed_roles for name in current_user.role_names):
            return True

        logger.warning(f"User {current_user.uid} lacks one of the roles {self.allowed_roles}")
        raise InsufficientPermission()


# Pre-configured checker for admin-only routes
admin_role_checker = RoleChecker(allowed_roles=["admin"])
