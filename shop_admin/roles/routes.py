from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession
from uuid import UUID
from typing import List

from shop_admin.db.main import get_session
from shop_admin.auth.dependencies import admin_role_checker
from .repository import RoleRepository
from .schemas import RoleCreate, RoleUpdate, RoleResponse
from .service import RoleService

role_router = APIRouter()
admin_only = [Depends(admin_role_checker)]


def get_role_service(session: AsyncSession = Depends(get_session)) -> RoleService:
    return RoleService(RoleRepository(session))


@role_router.get('/', response_model=List[RoleResponse])
async def list_roles(role_service: RoleService = Depends(get_role_service)):
    return await role_service.get_all_roles()

@role_router.get('/{uid}', response_model=RoleResponse)
async def get_role(uid: UUID, role_service: RoleService = Depends(get_role_service)):
    return await role_service.get_role_by_id(uid)

@role_router.post('/', response_model=RoleResponse, status_code=status.HTTP_201_CREATED, dependencies=admin_only)
async def create_role(data: RoleCreate, role_service: RoleService = Depends(get_role_service)):
    return await role_service.create_role(data)

@role_router.put('/{uid}', response_model=RoleResponse, dependencies=admin_only)
async def update_role(uid: UUID, data: RoleUpdate, role_service: RoleService = Depends(get_role_service)):
    return await role_service.update_role(uid, data)

@role_router.delete('/{uid}', status_code=status.HTTP_200_OK, dependencies=admin_only)
async def delete_role(uid: UUID, role_service: RoleService = Depends(get_role_service)):
    await role_service.delete_role(uid)
    return {"message": "Role deleted successfully"}
