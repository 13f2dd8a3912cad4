from typing import List
import uuid
import logging

from shop_admin.db.models import Product
from shop_admin.errors import NotFound
from .repository import ProductRepository
from .schemas import ProductCreateModel, ProductUpdateModel

logger = logging.getLogger(__name__)


class ProductService:
    # a null for these is treated as "keep the stored value"
    REQUIRED_FIELDS = ("name", "price", "stock")

    def __init__(self, product_repository: ProductRepository):
        self.product_repository = product_repository

    async def get_all_products(self) -> List[Product]:
        return await self.product_repository.get_all()

    async def get_product(self, uid: uuid.UUID) -> Product:
        product = await self.product_repository.get_by_id(uid)
        if not product:
            raise NotFound("Product not found")
        return product

    async def create_product(self, data: ProductCreateModel) -> Product:
        product = await self.product_repository.create(Product(**data.model_dump()))
        logger.info(f"Product {product.uid} created")
        return product

    async def update_product(self, uid: uuid.UUID, data: ProductUpdateModel) -> Product:
        await self.get_product(uid)
        update_data = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if value is not None or field not in self.REQUIRED_FIELDS
        }
        product = await self.product_repository.update(uid, update_data)
        logger.info(f"Product {uid} updated: {sorted(update_data)}")
        return product

    async def delete_product(self, uid: uuid.UUID) -> None:
        await self.get_product(uid)
        await self.product_repository.delete(uid)
        logger.info(f"Product {uid} deleted")
