from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession
from uuid import UUID
from typing import List

from shop_admin.db.main import get_session
from shop_admin.auth.dependencies import admin_role_checker
from .repository import OrderRepository
from .schemas import OrderCreate, OrderUpdate, OrderResponse
from .service import OrderService

order_router = APIRouter(dependencies=[Depends(admin_role_checker)])


def get_order_service(session: AsyncSession = Depends(get_session)) -> OrderService:
    return OrderService(OrderRepository(session))


@order_router.get('/', response_model=List[OrderResponse])
async def list_orders(order_service: OrderService = Depends(get_order_service)):
    return await order_service.get_all_orders()

@order_router.get('/{uid}', response_model=OrderResponse)
async def get_order(uid: UUID, order_service: OrderService = Depends(get_order_service)):
    return await order_service.get_order(uid)

@order_router.post('/', response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(data: OrderCreate, order_service: OrderService = Depends(get_order_service)):
    return await order_service.create_order(data)

@order_router.put('/{uid}', response_model=OrderResponse)
async def update_order(uid: UUID, data: OrderUpdate, order_service: OrderService = Depends(get_order_service)):
    return await order_service.update_order(uid, data)

@order_router.delete('/{uid}', status_code=status.HTTP_200_OK)
async def delete_order(uid: UUID, order_service: OrderService = Depends(get_order_service)):
    await order_service.delete_order(uid)
    return {"message": "Order deleted successfully"}
