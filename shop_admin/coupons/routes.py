from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession
from uuid import UUID
from typing import List

from shop_admin.db.main import get_session
from shop_admin.auth.dependencies import AccessTokenBearer, admin_role_checker
from . import schemas
from .repository import CouponRepository
from .service import CouponService

coupon_router = APIRouter()
access_token_bearer = AccessTokenBearer()
admin_only = [Depends(admin_role_checker)]


def get_coupon_service(session: AsyncSession = Depends(get_session)) -> CouponService:
    return CouponService(CouponRepository(session))


@coupon_router.get("/", response_model=List[schemas.CouponResponse], dependencies=admin_only)
async def list_coupons(coupon_service: CouponService = Depends(get_coupon_service)):
    return await coupon_service.get_all_coupons()

@coupon_router.get("/code/{code}", response_model=schemas.CouponResponse)
async def read_coupon_by_code(code: str, coupon_service: CouponService = Depends(get_coupon_service)):
    return await coupon_service.get_coupon_by_code(code)

@coupon_router.post("/validate/{code}", response_model=schemas.CouponValidationResponse)
async def validate_coupon(code: str, coupon_service: CouponService = Depends(get_coupon_service)):
    return await coupon_service.validate_coupon(code)

@coupon_router.post("/apply/{code}", response_model=schemas.CouponApplyResponse)
async def apply_coupon(code: str, coupon_service: CouponService = Depends(get_coupon_service), token_details: dict = Depends(access_token_bearer)):
    return await coupon_service.apply_coupon(code)

@coupon_router.get("/{uid}", response_model=schemas.CouponResponse, dependencies=admin_only)
async def read_coupon(uid: UUID, coupon_service: CouponService = Depends(get_coupon_service)):
    return await coupon_service.get_coupon_by_id(uid)

@coupon_router.post("/", response_model=schemas.CouponResponse, status_code=status.HTTP_201_CREATED, dependencies=admin_only)
async def create_coupon(data: schemas.CouponCreate, coupon_service: CouponService = Depends(get_coupon_service)):
    return await coupon_service.create_coupon(data)

@coupon_router.put("/{uid}", response_model=schemas.CouponResponse, dependencies=admin_only)
async def update_coupon(uid: UUID, data: schemas.CouponUpdate, coupon_service: CouponService = Depends(get_coupon_service)):
    return await coupon_service.update_coupon(uid, data)

@coupon_router.delete("/{uid}", status_code=status.HTTP_204_NO_CONTENT, dependencies=admin_only)
async def delete_coupon(uid: UUID, coupon_service: CouponService = Depends(get_coupon_service)):
    await coupon_service.delete_coupon(uid)
