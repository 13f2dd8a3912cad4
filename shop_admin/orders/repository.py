from typing import Optional

from sqlmodel import select

from shop_admin.db.models import Order
from shop_admin.db.repository import BaseRepository


class OrderRepository(BaseRepository[Order]):
    model = Order

    async def get_by_order_number(self, order_number: str) -> Optional[Order]:
        statement = select(Order).where(Order.order_number == order_number).execution_options(populate_existing=True)
        result = await self.session.exec(statement)
        return result.first()
