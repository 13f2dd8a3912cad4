from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import ClassVar, Optional, Tuple
from datetime import datetime
import uuid

from shop_admin.db.models import DiscountType
from .repository import normalize_code


def validate_code(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = normalize_code(value)
    if not value:
        raise ValueError("Coupon code must not be blank")
    return value


class CouponBase(BaseModel):
    code: str = Field(min_length=1)
    discount_type: DiscountType
    discount_value: float = Field(ge=0)
    min_purchase: float = Field(default=0.0, ge=0)
    max_uses: Optional[int] = Field(default=None, ge=0)
    expiration_date: Optional[datetime] = None
    is_active: bool = True

    @field_validator("code")
    @classmethod
    def clean_code(cls, value):
        return validate_code(value)


class CouponCreate(CouponBase):
    # accepted for compatibility with clients that echo it back; a new coupon always starts at 0
    current_uses: Optional[int] = Field(default=None, ge=0)


class CouponUpdate(BaseModel):
    """One optional slot per mutable coupon field.

    Only fields present in the request body are applied. ``max_uses`` and
    ``expiration_date`` accept an explicit null (unlimited / never expires);
    a null for any other field is ignored.
    """
    code: Optional[str] = Field(default=None, min_length=1)
    discount_type: Optional[DiscountType] = None
    discount_value: Optional[float] = Field(default=None, ge=0)
    min_purchase: Optional[float] = Field(default=None, ge=0)
    max_uses: Optional[int] = Field(default=None, ge=0)
    current_uses: Optional[int] = Field(default=None, ge=0)
    expiration_date: Optional[datetime] = None
    is_active: Optional[bool] = None

    @field_validator("code")
    @classmethod
    def clean_code(cls, value):
        return validate_code(value)

    NULLABLE_FIELDS: ClassVar[Tuple[str, ...]] = ("max_uses", "expiration_date")

    def changes(self) -> dict:
        return {
            field: value
            for field, value in self.model_dump(exclude_unset=True).items()
            if value is not None or field in self.NULLABLE_FIELDS
        }


class CouponResponse(CouponBase):
    uid: uuid.UUID
    current_uses: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CouponValidationResponse(BaseModel):
    valid: bool
    coupon: CouponResponse
    message: str


class CouponApplyResponse(BaseModel):
    applied: bool
    coupon: CouponResponse
    message: str
