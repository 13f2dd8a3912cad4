import logging

from shop_admin.errors import Unauthorized
from shop_admin.users.repository import UserRepository
from .schemas import LoginResponse, AuthenticatedUser
from .utils import create_access_token, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def login(self, email: str, password: str) -> LoginResponse:
        user = await self.user_repository.get_by_email(email)

        # the same error for both cases so callers cannot probe for registered emails
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise Unauthorized("Invalid email or password")

        role_names = user.role_names
        token = create_access_token(
            user_data={
                'id': str(user.uid),
                'email': user.email,
                'roles': role_names
            }
        )

        logger.info(f"User {user.uid} logged in")
        return LoginResponse(
            token=token,
            user=AuthenticatedUser(
                id=user.uid,
                name=user.name,
                email=user.email,
                roles=role_names
            )
        )
