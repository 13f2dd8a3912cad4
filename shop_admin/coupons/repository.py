from datetime import datetime
from typing import Optional
from sqlalchemy import update, or_
from sqlmodel import select
import uuid

from shop_admin.db.models import Coupon, utc_now
from shop_admin.db.repository import BaseRepository


def normalize_code(code: str) -> str:
    return code.strip().upper()


class CouponRepository(BaseRepository[Coupon]):
    model = Coupon

    async def get_by_code(self, code: str) -> Optional[Coupon]:
        result = await self.session.exec(
            select(Coupon).where(Coupon.code == normalize_code(code)).execution_options(populate_existing=True)
        )
        return result.first()

    async def create(self, entity: Coupon) -> Coupon:
        entity.code = normalize_code(entity.code)
        return await super().create(entity)

    async def update(self, uid: uuid.UUID, changes: dict) -> Optional[Coupon]:
        if changes.get("code") is not None:
            changes = {**changes, "code": normalize_code(changes["code"])}
        return await super().update(uid, changes)

    async def increment_uses(self, uid: uuid.UUID, now: datetime) -> Optional[Coupon]:
        """Atomically add one use if the coupon is still usable at ``now``.

        The usability conditions are repeated in the WHERE clause so two
        concurrent applications cannot both write back the same stale count.
        Returns the refreshed coupon, or None when no row qualified.
        """
        statement = (
            update(Coupon)
            .where(
                Coupon.uid == uid,
                Coupon.is_active == True,  # noqa: E712
                or_(Coupon.max_uses.is_(None), Coupon.current_uses < Coupon.max_uses),
                or_(Coupon.expiration_date.is_(None), Coupon.expiration_date >= now),
            )
            .values(current_uses=Coupon.current_uses + 1, updated_at=utc_now())
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(statement)
        await self.session.commit()

        if result.rowcount == 0:
            return None

        refreshed = await self.session.exec(
            select(Coupon).where(Coupon.uid == uid).execution_options(populate_existing=True)
        )
        return refreshed.first()
