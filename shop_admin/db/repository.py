from typing import Generic, List, Optional, Type, TypeVar
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession
import uuid

from .models import utc_now

ModelT = TypeVar("ModelT", bound=SQLModel)


class BaseRepository(Generic[ModelT]):
    """Persistence gateway shared by every entity.

    Subclasses set ``model`` and add their unique-key lookups. Every read goes
    to the database; nothing is cached between calls.
    """
    model: Type[ModelT]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_all(self) -> List[ModelT]:
        result = await self.session.exec(select(self.model).execution_options(populate_existing=True))
        return list(result.all())

    async def get_by_id(self, uid: uuid.UUID) -> Optional[ModelT]:
        result = await self.session.exec(
            select(self.model).where(self.model.uid == uid).execution_options(populate_existing=True)
        )
        return result.first()

    async def create(self, entity: ModelT) -> ModelT:
        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def update(self, uid: uuid.UUID, changes: dict) -> Optional[ModelT]:
        entity = await self.get_by_id(uid)
        if entity is None:
            return None

        for field, value in changes.items():
            setattr(entity, field, value)
        if hasattr(entity, "updated_at"):
            entity.updated_at = utc_now()

        self.session.add(entity)
        await self.session.commit()
        await self.session.refresh(entity)
        return entity

    async def delete(self, uid: uuid.UUID) -> None:
        entity = await self.get_by_id(uid)
        if entity is not None:
            await self.session.delete(entity)
            await self.session.commit()
