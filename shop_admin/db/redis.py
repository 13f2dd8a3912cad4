import redis.asyncio as aioredis
from shop_admin.config import Config

token_blocklist = aioredis.from_url(Config.REDIS_URL)


async def add_jti_to_blocklist(jti: str) -> None:
    await token_blocklist.set(name=jti, value="", ex=Config.JTI_EXPIRY_SECONDS)


async def token_in_blocklist(jti: str) -> bool:
    jti = await token_blocklist.get(jti)
    return jti is not None


async def close_redis() -> None:
    await token_blocklist.aclose()
