"""
The conditional use counter increment, run against the database
"""

import pytest
import pytest_asyncio
from datetime import timedelta
from uuid import uuid4

from shop_admin.db.models import Coupon, DiscountType, utc_now
from shop_admin.coupons.repository import CouponRepository


pytestmark = pytest.mark.asyncio


@pytest_asyncio.fixture
async def coupon_repository(db_session) -> CouponRepository:
    return CouponRepository(db_session)


async def store_coupon(coupon_repository: CouponRepository, **overrides) -> Coupon:
    data = {
        "code": "race",
        "discount_type": DiscountType.percentage,
        "discount_value": 15,
        "max_uses": 3,
        "current_uses": 0,
        "is_active": True,
    }
    data.update(overrides)
    return await coupon_repository.create(Coupon(**data))


async def stored_uses(coupon_repository: CouponRepository, coupon: Coupon) -> int:
    return (await coupon_repository.get_by_id(coupon.uid)).current_uses


class TestIncrementUses:
    async def test_last_available_use(self, coupon_repository):
        coupon = await store_coupon(coupon_repository, max_uses=3, current_uses=2)

        updated = await coupon_repository.increment_uses(coupon.uid, utc_now())

        assert updated is not None
        assert updated.current_uses == 3
        assert updated.current_uses == updated.max_uses
        assert await stored_uses(coupon_repository, coupon) == 3

    async def test_exhausted_coupon_is_not_touched(self, coupon_repository):
        coupon = await store_coupon(coupon_repository, max_uses=3, current_uses=3)

        assert await coupon_repository.increment_uses(coupon.uid, utc_now()) is None
        assert await stored_uses(coupon_repository, coupon) == 3

    async def test_inactive_coupon_is_not_touched(self, coupon_repository):
        coupon = await store_coupon(coupon_repository, is_active=False, current_uses=1)

        assert await coupon_repository.increment_uses(coupon.uid, utc_now()) is None
        assert await stored_uses(coupon_repository, coupon) == 1

    async def test_expired_coupon_is_not_touched(self, coupon_repository):
        coupon = await store_coupon(coupon_repository, expiration_date=utc_now() - timedelta(hours=1))

        assert await coupon_repository.increment_uses(coupon.uid, utc_now()) is None
        assert await stored_uses(coupon_repository, coupon) == 0

    async def test_expiry_instant_still_counts(self, coupon_repository):
        now = utc_now()
        coupon = await store_coupon(coupon_repository, expiration_date=now)

        updated = await coupon_repository.increment_uses(coupon.uid, now)

        assert updated.current_uses == 1

    async def test_unlimited_coupon(self, coupon_repository):
        coupon = await store_coupon(coupon_repository, max_uses=None, current_uses=250)

        updated = await coupon_repository.increment_uses(coupon.uid, utc_now())

        assert updated.current_uses == 251

    async def test_unknown_coupon(self, coupon_repository):
        assert await coupon_repository.increment_uses(uuid4(), utc_now()) is None

    async def test_stale_read_loses_to_the_guard(self, coupon_repository):
        """Two callers validated the same last use; only the first write lands."""
        coupon = await store_coupon(coupon_repository, max_uses=1, current_uses=0)

        first = await coupon_repository.increment_uses(coupon.uid, utc_now())
        second = await coupon_repository.increment_uses(coupon.uid, utc_now())

        assert first.current_uses == 1
        assert second is None
        assert await stored_uses(coupon_repository, coupon) == 1
