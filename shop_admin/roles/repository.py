from typing import Optional
from sqlalchemy import delete
from sqlmodel import select
import uuid

from shop_admin.db.models import Role, UserRoleLink
from shop_admin.db.repository import BaseRepository


class RoleRepository(BaseRepository[Role]):
    model = Role

    async def get_by_name(self, name: str) -> Optional[Role]:
        result = await self.session.exec(select(Role).where(Role.name == name))
        return result.first()

    async def delete(self, uid: uuid.UUID) -> None:
        # drop memberships first so no user keeps a dangling role reference
        await self.session.execute(delete(UserRoleLink).where(UserRoleLink.role_uid == uid))
        await super().delete(uid)
