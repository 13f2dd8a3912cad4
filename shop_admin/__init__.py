from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from shop_admin.config import Config
from shop_admin.db.main import init_db, close_db
from shop_admin.db.models import utc_now
from shop_admin.db.redis import close_redis

from shop_admin.auth.routes import auth_router
from shop_admin.products.routes import product_router
from shop_admin.orders.routes import order_router
from shop_admin.users.routes import user_router
from shop_admin.roles.routes import role_router
from shop_admin.coupons.routes import coupon_router

from .errors import register_all_errors
from .middleware import register_middleware

logging.basicConfig(
    level=Config.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

version = "v1"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting Shop Admin API {version}")
    await init_db()
    yield
    await close_db()
    await close_redis()
    logger.info("Shop Admin API stopped")


app = FastAPI(
    title = "Shop Admin",
    description = "A REST API for administering an online shop: products, orders, users, roles and coupons",
    version = version,
    lifespan = lifespan,
)


register_all_errors(app)
register_middleware(app)

prefix = Config.API_PREFIX

app.include_router(auth_router, prefix=f"{prefix}/auth", tags = ['auth'])
app.include_router(product_router, prefix=f"{prefix}/products", tags=['products'])
app.include_router(order_router, prefix=f"{prefix}/orders", tags=['orders'])
app.include_router(user_router, prefix=f"{prefix}/users", tags=['users'])
app.include_router(role_router, prefix=f"{prefix}/roles", tags=['roles'])
app.include_router(coupon_router, prefix=f"{prefix}/coupons", tags=['coupons'])


@app.get(f"{prefix}/healthcheck", tags=['health'])
async def healthcheck():
    return {"status": "ok", "timestamp": utc_now().isoformat()}
