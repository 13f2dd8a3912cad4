from typing import Optional
from sqlmodel import select
import uuid

from shop_admin.db.models import User
from shop_admin.db.repository import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> Optional[User]:
        """Lookup used by login as well; the returned record carries the password hash."""
        result = await self.session.exec(
            select(User).where(User.email == email).execution_options(populate_existing=True)
        )
        return result.first()

    async def create(self, entity: User) -> User:
        self.session.add(entity)
        await self.session.commit()
        # reload so the role list is populated alongside the column values
        return await self.get_by_id(entity.uid)

    async def update(self, uid: uuid.UUID, changes: dict) -> Optional[User]:
        user = await super().update(uid, changes)
        if user is None:
            return None
        return await self.get_by_id(uid)
