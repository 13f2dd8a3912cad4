from datetime import datetime
from typing import List
import uuid
import logging

from shop_admin.db.models import Coupon, utc_now, to_naive_utc
from shop_admin.errors import NotFound, Conflict, BadRequest
from .repository import CouponRepository, normalize_code
from .schemas import (
    CouponCreate, CouponUpdate, CouponResponse,
    CouponValidationResponse, CouponApplyResponse
)

logger = logging.getLogger(__name__)


class CouponService:
    def __init__(self, coupon_repository: CouponRepository):
        self.coupon_repository = coupon_repository

    async def get_all_coupons(self) -> List[Coupon]:
        return await self.coupon_repository.get_all()

    async def get_coupon_by_id(self, uid: uuid.UUID) -> Coupon:
        coupon = await self.coupon_repository.get_by_id(uid)
        if not coupon:
            raise NotFound("Coupon not found")
        return coupon

    async def get_coupon_by_code(self, code: str) -> Coupon:
        coupon = await self.coupon_repository.get_by_code(code)
        if not coupon:
            raise NotFound("Coupon not found")
        return coupon

    async def create_coupon(self, data: CouponCreate) -> Coupon:
        if await self.coupon_repository.get_by_code(data.code):
            raise Conflict("Coupon code already exists")

        coupon = Coupon(
            code=data.code,
            discount_type=data.discount_type,
            discount_value=data.discount_value,
            min_purchase=data.min_purchase,
            # 0 on create means "no cap", the same as leaving it out
            max_uses=data.max_uses or None,
            current_uses=0,
            expiration_date=to_naive_utc(data.expiration_date),
            is_active=data.is_active,
        )
        coupon = await self.coupon_repository.create(coupon)
        logger.info(f"Coupon {coupon.code} created ({coupon.uid})")
        return coupon

    async def update_coupon(self, uid: uuid.UUID, data: CouponUpdate) -> Coupon:
        existing = await self.get_coupon_by_id(uid)
        changes = data.changes()

        if "code" in changes and normalize_code(changes["code"]) != existing.code:
            same_code = await self.coupon_repository.get_by_code(changes["code"])
            if same_code and same_code.uid != existing.uid:
                raise Conflict("Coupon code already exists")

        if "expiration_date" in changes:
            changes["expiration_date"] = to_naive_utc(changes["expiration_date"])

        coupon = await self.coupon_repository.update(uid, changes)
        logger.info(f"Coupon {uid} updated: {sorted(changes)}")
        return coupon

    async def delete_coupon(self, uid: uuid.UUID) -> None:
        await self.get_coupon_by_id(uid)
        await self.coupon_repository.delete(uid)
        logger.info(f"Coupon {uid} deleted")

    @staticmethod
    def check_usable(coupon: Coupon, now: datetime) -> None:
        """Raise BadRequest for the first rule the coupon breaks, in fixed order."""
        if not coupon.is_active:
            raise BadRequest("Coupon is not active")
        if coupon.expiration_date is not None and coupon.expiration_date < now:
            raise BadRequest("Coupon has expired")
        if coupon.max_uses is not None and coupon.current_uses >= coupon.max_uses:
            raise BadRequest("Coupon maximum uses reached")

    async def validate_coupon(self, code: str) -> CouponValidationResponse:
        coupon = await self.get_coupon_by_code(code)
        self.check_usable(coupon, utc_now())
        return CouponValidationResponse(
            valid=True,
            coupon=CouponResponse.model_validate(coupon),
            message="Coupon is valid"
        )

    async def apply_coupon(self, code: str) -> CouponApplyResponse:
        validation = await self.validate_coupon(code)

        updated = await self.coupon_repository.increment_uses(validation.coupon.uid, utc_now())
        if updated is None:
            # state changed between the read and the write; report what it is now
            await self.validate_coupon(code)
            raise BadRequest("Coupon maximum uses reached")

        logger.info(f"Coupon {updated.code} applied ({updated.current_uses} uses)")
        return CouponApplyResponse(
            applied=True,
            coupon=CouponResponse.model_validate(updated),
            message="Coupon applied successfully"
        )
