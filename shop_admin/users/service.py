from typing import List
import uuid
import logging

from shop_admin.db.models import User, Role
from shop_admin.errors import NotFound, Conflict, BadRequest, InsufficientPermission
from shop_admin.auth.utils import generate_passwd_hash
from shop_admin.roles.repository import RoleRepository
from .repository import UserRepository
from .schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    # the only roles a caller without admin rights may register with
    SELF_SERVICE_ROLES = ("customer",)

    def __init__(self, user_repository: UserRepository, role_repository: RoleRepository):
        self.user_repository = user_repository
        self.role_repository = role_repository

    async def get_all_users(self) -> List[User]:
        return await self.user_repository.get_all()

    async def get_user_by_id(self, uid: uuid.UUID) -> User:
        user = await self.user_repository.get_by_id(uid)
        if not user:
            raise NotFound("User not found")
        return user

    async def create_user(self, user_data: UserCreate, assigned_by_admin: bool = False) -> User:
        if not assigned_by_admin:
            privileged = [name for name in user_data.roles if name not in self.SELF_SERVICE_ROLES]
            if privileged:
                logger.warning(f"Registration of {user_data.email} asked for privileged roles {privileged}")
                raise InsufficientPermission(f"Role '{privileged[0]}' can only be assigned by an administrator")

        if await self.user_repository.get_by_email(user_data.email):
            raise Conflict(f"User with email '{user_data.email}' already exists")

        roles = await self.resolve_roles(user_data.roles)

        user = User(
            name=user_data.name,
            email=user_data.email,
            password_hash=generate_passwd_hash(user_data.password),
            roles=roles,
        )
        user = await self.user_repository.create(user)
        logger.info(f"User {user.email} created ({user.uid})")
        return user

    async def update_user(self, uid: uuid.UUID, user_data: UserUpdate) -> User:
        await self.get_user_by_id(uid)

        if user_data.email:
            same_email = await self.user_repository.get_by_email(user_data.email)
            if same_email and same_email.uid != uid:
                raise Conflict(f"User with email '{user_data.email}' already exists")

        changes = {}
        if user_data.name:
            changes["name"] = user_data.name
        if user_data.email:
            changes["email"] = user_data.email
        if user_data.password:
            changes["password_hash"] = generate_passwd_hash(user_data.password)
        if user_data.roles is not None:
            changes["roles"] = await self.resolve_roles(user_data.roles)

        user = await self.user_repository.update(uid, changes)
        logger.info(f"User {uid} updated: {sorted(changes)}")
        return user

    async def delete_user(self, uid: uuid.UUID) -> None:
        await self.get_user_by_id(uid)
        await self.user_repository.delete(uid)
        logger.info(f"User {uid} deleted")

    async def resolve_roles(self, role_names: List[str]) -> List[Role]:
        """Turn role names into stored roles; every name must exist."""
        if not role_names:
            raise BadRequest("At least one role is required")

        roles = []
        for role_name in dict.fromkeys(role_names):
            role = await self.role_repository.get_by_name(role_name)
            if not role:
                raise NotFound(f"Role '{role_name}' not found")
            roles.append(role)
        return roles
