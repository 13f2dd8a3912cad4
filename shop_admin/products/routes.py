from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession
from uuid import UUID
from typing import List

from shop_admin.db.main import get_session
from shop_admin.auth.dependencies import admin_role_checker
from .repository import ProductRepository
from .schemas import ProductCreateModel, ProductUpdateModel, ProductResponse
from .service import ProductService

product_router = APIRouter()
admin_only = [Depends(admin_role_checker)]


def get_product_service(session: AsyncSession = Depends(get_session)) -> ProductService:
    return ProductService(ProductRepository(session))


@product_router.get('/', response_model=List[ProductResponse])
async def list_products(product_service: ProductService = Depends(get_product_service)):
    return await product_service.get_all_products()

@product_router.get('/{uid}', response_model=ProductResponse)
async def get_product(uid: UUID, product_service: ProductService = Depends(get_product_service)):
    return await product_service.get_product(uid)

@product_router.post('/', response_model=ProductResponse, status_code=status.HTTP_201_CREATED, dependencies=admin_only)
async def create_product(data: ProductCreateModel, product_service: ProductService = Depends(get_product_service)):
    return await product_service.create_product(data)

@product_router.put('/{uid}', response_model=ProductResponse, dependencies=admin_only)
async def update_product(uid: UUID, data: ProductUpdateModel, product_service: ProductService = Depends(get_product_service)):
    return await product_service.update_product(uid, data)

@product_router.delete('/{uid}', status_code=status.HTTP_200_OK, dependencies=admin_only)
async def delete_product(uid: UUID, product_service: ProductService = Depends(get_product_service)):
    await product_service.delete_product(uid)
    return {"message": "Product deleted successfully"}
