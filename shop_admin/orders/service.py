from typing import List
import uuid
import logging

from shop_admin.db.models import Order, to_naive_utc
from shop_admin.errors import NotFound, Conflict
from .repository import OrderRepository
from .schemas import OrderCreate, OrderUpdate

logger = logging.getLogger(__name__)


class OrderService:
    # a null for these is treated as "keep the stored value"
    REQUIRED_FIELDS = (
        "order_number", "customer_name", "customer_email", "items",
        "subtotal", "total_discount", "total", "status", "order_date",
    )

    def __init__(self, order_repository: OrderRepository):
        self.order_repository = order_repository

    async def get_all_orders(self) -> List[Order]:
        return await self.order_repository.get_all()

    async def get_order(self, uid: uuid.UUID) -> Order:
        order = await self.order_repository.get_by_id(uid)
        if not order:
            raise NotFound("Order not found")
        return order

    async def create_order(self, data: OrderCreate) -> Order:
        if await self.order_repository.get_by_order_number(data.order_number):
            raise Conflict(f"Order with number '{data.order_number}' already exists")

        order_data = data.model_dump(exclude={"items", "order_date"})
        order = Order(
            **order_data,
            items=[item.model_dump(mode="json") for item in data.items],
        )
        if data.order_date is not None:
            order.order_date = to_naive_utc(data.order_date)

        order = await self.order_repository.create(order)
        logger.info(f"Order {order.order_number} created for {order.customer_email}")
        return order

    async def update_order(self, uid: uuid.UUID, data: OrderUpdate) -> Order:
        order = await self.get_order(uid)

        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True, exclude={"items"}).items()
            if value is not None or field not in self.REQUIRED_FIELDS
        }
        if data.items is not None:
            changes["items"] = [item.model_dump(mode="json") for item in data.items]
        if "order_date" in changes:
            changes["order_date"] = to_naive_utc(changes["order_date"])

        new_number = changes.get("order_number")
        if new_number and new_number != order.order_number:
            existing = await self.order_repository.get_by_order_number(new_number)
            if existing and existing.uid != uid:
                raise Conflict(f"Order with number '{new_number}' already exists")

        order = await self.order_repository.update(uid, changes)
        logger.info(f"Order {uid} updated: {sorted(changes)}")
        return order

    async def delete_order(self, uid: uuid.UUID) -> None:
        await self.get_order(uid)
        await self.order_repository.delete(uid)
        logger.info(f"Order {uid} deleted")
