from typing import List
import uuid
import logging

from shop_admin.db.models import Role
from shop_admin.errors import NotFound, Conflict
from .repository import RoleRepository
from .schemas import RoleCreate, RoleUpdate

logger = logging.getLogger(__name__)


class RoleService:
    def __init__(self, role_repository: RoleRepository):
        self.role_repository = role_repository

    async def get_all_roles(self) -> List[Role]:
        return await self.role_repository.get_all()

    async def get_role_by_id(self, uid: uuid.UUID) -> Role:
        role = await self.role_repository.get_by_id(uid)
        if not role:
            raise NotFound("Role not found")
        return role

    async def create_role(self, data: RoleCreate) -> Role:
        if await self.role_repository.get_by_name(data.name):
            raise Conflict(f"Role with name '{data.name}' already exists")

        role = await self.role_repository.create(Role(name=data.name))
        logger.info(f"Role {role.name} created ({role.uid})")
        return role

    async def update_role(self, uid: uuid.UUID, data: RoleUpdate) -> Role:
        await self.get_role_by_id(uid)

        same_name = await self.role_repository.get_by_name(data.name)
        if same_name and same_name.uid != uid:
            raise Conflict(f"Role with name '{data.name}' already exists")

        role = await self.role_repository.update(uid, {"name": data.name})
        logger.info(f"Role {uid} renamed to {role.name}")
        return role

    async def delete_role(self, uid: uuid.UUID) -> None:
        await self.get_role_by_id(uid)
        await self.role_repository.delete(uid)
        logger.info(f"Role {uid} deleted")
