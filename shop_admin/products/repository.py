from shop_admin.db.models import Product
from shop_admin.db.repository import BaseRepository


class ProductRepository(BaseRepository[Product]):
    model = Product
